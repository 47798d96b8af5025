import pytest

from employee_directory_api.app.schemas.employee import EmployeeRecord
from employee_directory_api.app.services.normalizer import clean_departments, normalize_record, split_name


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Dale Miller", ("Dale", "Miller")),
        ("  Dale Miller  ", ("Dale", "Miller")),
        ("Dale \t  Miller", ("Dale", "Miller")),
        ("Mary Ann Smith", ("Mary", "Ann Smith")),
        ("John", ("John", "")),
    ],
)
def test_split_name(raw, expected):
    assert split_name(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "   ", "\t\n"])
def test_split_name_rejects_blank(raw):
    assert split_name(raw) is None


def test_clean_departments_trims_and_drops_blanks():
    cleaned = clean_departments([" finance ", None, "", "   ", "finance", "IT", "it"])

    assert cleaned == frozenset({"finance", "IT", "it"})


def test_clean_departments_accepts_missing_list():
    assert clean_departments(None) == frozenset()
    assert clean_departments([]) == frozenset()


def test_normalize_record():
    normalized = normalize_record(EmployeeRecord(name=" Michael Smith ", departments=["finance", " it"]))

    assert normalized.first_name == "Michael"
    assert normalized.last_name == "Smith"
    assert normalized.full_name == "Michael Smith"
    assert normalized.departments == frozenset({"finance", "it"})


def test_normalize_record_single_token_keeps_trailing_space():
    normalized = normalize_record(EmployeeRecord(name="John"))

    assert normalized.full_name == "John "
    assert normalized.departments == frozenset()


@pytest.mark.parametrize("name", [None, "", "    "])
def test_normalize_record_without_name_is_skipped(name):
    assert normalize_record(EmployeeRecord(name=name, departments=["finance"])) is None


def test_record_schema_treats_missing_departments_as_empty():
    assert EmployeeRecord(name="Dale Miller", departments=None).departments == []
