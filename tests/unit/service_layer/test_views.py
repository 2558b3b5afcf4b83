"""Unit tests for the read-side views (listing and distribution report)."""

import json

import pytest

from company_track.service_layer.views import (
    department_listing,
    distribution_report,
    format_share,
    write_report,
)

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    "employees, total, expected",
    [
        (1, 1, "100.00% (1 employees)"),
        (1, 3, "33.33% (1 employees)"),
        (2, 3, "66.67% (2 employees)"),
        (0, 5, "0.00% (0 employees)"),
        (0, 0, "0.00% (0 employees)"),
    ],
)
def test_format_share(employees: int, total: int, expected: str):
    """Shares use two decimals and never divide by zero."""
    assert format_share(employees, total) == expected


def test_listing_groups_employees_by_department(make_company):
    """Each department is paired with its own employees, in order."""
    company = make_company({"engineering": ["Alice", "Bob"], "sales": ["Dan"], "legal": []})

    listing = department_listing(company)

    assert [(d.name, [e.name for e in staff]) for d, staff in listing] == [
        ("engineering", ["Alice", "Bob"]),
        ("sales", ["Dan"]),
        ("legal", []),
    ]


def test_listing_of_empty_company(make_company):
    """No departments means an empty listing."""
    assert department_listing(make_company()) == []


def test_report_single_department_single_employee(make_company):
    """One department with one employee holds 100% of the company."""
    company = make_company()
    company.add_department("Engineering ")
    company.hire_employee("Alice", "Engineering")

    assert distribution_report(company) == {
        "departments": 1,
        "employees": 1,
        "company_distribution": {"engineering": "100.00% (1 employees)"},
    }


def test_report_with_several_departments(make_company):
    """Percentages are relative to the whole company."""
    company = make_company({"engineering": ["Alice", "Bob", "Carol"], "sales": ["Dan"]})

    report = distribution_report(company)

    assert report["departments"] == 2
    assert report["employees"] == 4
    assert report["company_distribution"] == {
        "engineering": "75.00% (3 employees)",
        "sales": "25.00% (1 employees)",
    }


def test_report_of_empty_company(make_company):
    """No departments and no employees gives an empty distribution."""
    assert distribution_report(make_company()) == {
        "departments": 0,
        "employees": 0,
        "company_distribution": {},
    }


def test_report_departments_without_employees(make_company):
    """With zero employees every department reports 0.00%."""
    company = make_company({"engineering": [], "sales": []})

    assert distribution_report(company)["company_distribution"] == {
        "engineering": "0.00% (0 employees)",
        "sales": "0.00% (0 employees)",
    }


def test_write_report_overwrites_file(make_company, tmp_path):
    """The report is written as JSON, replacing any existing content."""
    path = tmp_path / "report.json"
    path.write_text("stale", encoding="utf-8")
    company = make_company({"engineering": ["Alice"]})

    assert write_report(company, path) == path
    assert json.loads(path.read_text(encoding="utf-8")) == distribution_report(company)


def test_write_report_defaults_to_working_directory(make_company, tmp_path, monkeypatch):
    """Without a path the report lands in ./report.json."""
    monkeypatch.chdir(tmp_path)

    write_report(make_company({"sales": ["Dan"]}))

    report = json.loads((tmp_path / "report.json").read_text(encoding="utf-8"))
    assert report["company_distribution"] == {"sales": "100.00% (1 employees)"}
