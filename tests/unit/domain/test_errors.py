"""Unit tests for domain errors."""

import pytest

from company_track.domain import errors


@pytest.mark.parametrize(
    "error_cls",
    [errors.DuplicateDepartmentError, errors.DepartmentNotFoundError],
)
def test_department_errors_are_domain_errors(error_cls):
    """Department errors derive from DomainError and keep the name."""
    error = error_cls("engineering")
    assert isinstance(error, errors.DomainError)
    assert error.name == "engineering"


def test_duplicate_department_message():
    """The message names the existing department."""
    assert (
        str(errors.DuplicateDepartmentError("engineering"))
        == "Department 'engineering' already exists."
    )


def test_department_not_found_message():
    """The message names the missing department."""
    assert (
        str(errors.DepartmentNotFoundError("marketing"))
        == "Department 'marketing' does not exist."
    )


def test_invalid_name_message():
    """The message names the kind of entity and the rejected value."""
    error = errors.InvalidNameError("employee", "  ")
    assert isinstance(error, errors.DomainError)
    assert str(error) == "Employee name '  ' is empty."
