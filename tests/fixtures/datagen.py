"""Fixtures for generating test data."""

from collections.abc import Callable

import pytest

from company_track.adapters.id_generators import SimpleIdGenerator
from company_track.domain.aggregates import Company

# pylint: disable=redefined-outer-name


@pytest.fixture
def id_generator() -> SimpleIdGenerator:
    """Deterministic identifiers: 00...01, 00...02, ..."""
    return SimpleIdGenerator()


@pytest.fixture
def make_company(id_generator: SimpleIdGenerator) -> Callable[..., Company]:
    """Factory fixture: build a fresh Company and optionally populate it.

    Example:
        make_company({"engineering": ["Alice", "Bob"], "sales": []})

    The returned company has its events committed, as if it had been loaded.
    """

    def _make_company(staff: dict[str, list[str]] | None = None) -> Company:
        company = Company(id_generator)
        for department, employees in (staff or {}).items():
            company.add_department(department)
            for employee in employees:
                company.hire_employee(employee, department)
        company.commit()
        return company

    return _make_company
