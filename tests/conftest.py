import pytest

from employee_directory_api.app.schemas.employee import EmployeeRecord
from employee_directory_api.app.services.catalog_service import EmployeeCatalog

EMPLOYEE_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<employees>
    <employee>
        <name>Dale Miller</name>
        <department>finance</department>
    </employee>
    <employee>
        <name>George Smith</name>
    </employee>
    <employee>
        <name>Michael Smith</name>
        <department>finance</department>
        <department>it</department>
    </employee>
    <employee>
        <name>Dale Miller</name>
        <department>packaging</department>
    </employee>
</employees>
"""


@pytest.fixture
def sample_records():
    return [
        EmployeeRecord(name="Dale Miller", departments=["finance"]),
        EmployeeRecord(name="George Smith", departments=[]),
        EmployeeRecord(name="Michael Smith", departments=["finance", "it"]),
        EmployeeRecord(name="Dale Miller", departments=["packaging"]),
    ]


@pytest.fixture
def catalog(sample_records):
    return EmployeeCatalog.from_records(sample_records)


@pytest.fixture
def employee_xml(tmp_path):
    path = tmp_path / "employees.xml"
    path.write_bytes(EMPLOYEE_XML)
    return path


@pytest.fixture
def employee_document():
    return EMPLOYEE_XML
