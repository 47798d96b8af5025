"""
Record source for the employee catalog.

The employee document is an XML file of the form::

    <employees>
      <employee>
        <name>Dale Miller</name>
        <department>finance</department>
        <department>packaging</department>
      </employee>
    </employees>

The root element name is not checked.  ``employee`` children are read
in document order; each carries one ``name`` and any number of
``department`` elements.  The document is located either by a
filesystem path or by an ``http(s)`` URL, which is fetched with
``requests``.

Failures are reported as :class:`RecordSourceError` whose ``kind`` is
``"unreadable"`` when the document cannot be retrieved and
``"malformed"`` when it is not well-formed XML.  The whole document is
parsed before any record is returned, so callers never see a partial
record list.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional
from xml.etree import ElementTree as ET

import requests

from employee_directory_api.app.schemas.employee import EmployeeRecord

logger = logging.getLogger(__name__)


class RecordSourceError(Exception):
    """Raised when the employee document cannot be read or parsed."""

    UNREADABLE = "unreadable"
    MALFORMED = "malformed"

    def __init__(self, kind: str, source: str, message: str) -> None:
        super().__init__(f"{kind} employee source {source}: {message}")
        self.kind = kind
        self.source = source
        self.message = message


def is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def _download(http: requests.Session, source: str, timeout: float) -> bytes:
    try:
        logger.debug("Fetching employee document from %s", source)
        response = http.get(source, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise RecordSourceError(RecordSourceError.UNREADABLE, source, str(exc)) from exc
    return response.content


def fetch_document(
    source: str,
    *,
    timeout: float = 10,
    session: Optional[requests.Session] = None,
) -> bytes:
    """Return the raw bytes of the document at ``source``."""
    if is_url(source):
        if session is not None:
            return _download(session, source, timeout)
        with requests.Session() as http:
            return _download(http, source, timeout)

    try:
        return Path(source).read_bytes()
    except OSError as exc:
        raise RecordSourceError(RecordSourceError.UNREADABLE, source, str(exc)) from exc


def parse_records(document: bytes, source: str = "<document>") -> List[EmployeeRecord]:
    """Parse an employee XML document into raw records."""
    try:
        root = ET.fromstring(document)
    except ET.ParseError as exc:
        raise RecordSourceError(RecordSourceError.MALFORMED, source, str(exc)) from exc

    records: List[EmployeeRecord] = []
    for node in root.findall("employee"):
        records.append(
            EmployeeRecord(
                name=node.findtext("name"),
                departments=[element.text for element in node.findall("department")],
            )
        )
    return records


def read_records(
    source: str,
    *,
    timeout: float = 10,
    session: Optional[requests.Session] = None,
) -> List[EmployeeRecord]:
    """Fetch and parse the employee document at ``source``."""
    document = fetch_document(source, timeout=timeout, session=session)
    records = parse_records(document, source)
    logger.debug("Read %d employee nodes from %s", len(records), source)
    return records
