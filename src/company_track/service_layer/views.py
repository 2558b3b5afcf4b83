"""Read-side views over the Company aggregate.

These never mutate the aggregate and never touch storage.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from company_track.config import REPORT_FILENAME

if TYPE_CHECKING:
    from company_track.domain.aggregates import Company
    from company_track.domain.entities import Department, Employee

logger = logging.getLogger(__name__)


def department_listing(company: Company) -> list[tuple[Department, list[Employee]]]:
    """Pair every department with its employees.

    Args:
        company (Company): The aggregate to read from.

    Returns:
        list[tuple[Department, list[Employee]]]: One entry per department, in
        the order departments were added; employees keep their hiring order.
    """
    return [
        (
            department,
            [e for e in company.employees if e.department_id == department.id],
        )
        for department in company.departments
    ]


def format_share(employees: int, total_employees: int) -> str:
    """Render a department's share as ``"<pct>% (<n> employees)"``.

    The percentage has two decimals. With no employees at all the share is
    ``0.00%`` rather than a division by zero.
    """
    pct = employees * 100 / total_employees if total_employees else 0.0
    return f"{pct:.2f}% ({employees} employees)"


def distribution_report(company: Company) -> dict[str, Any]:
    """Build the distribution report.

    Returns:
        ``{"departments": <count>, "employees": <count>,
        "company_distribution": {<department name>: "<pct>% (<n> employees)"}}``
    """
    total = company.get_total_employees()
    return {
        "departments": len(company.departments),
        "employees": total,
        "company_distribution": {
            department.name: format_share(
                company.get_employees_by_department(department.id), total
            )
            for department in company.departments
        },
    }


def write_report(company: Company, path: Path = Path(REPORT_FILENAME)) -> Path:
    """Write the distribution report as JSON, replacing any existing file.

    Returns:
        The path written to.
    """
    report = distribution_report(company)
    path.write_text(json.dumps(report), encoding="utf-8")
    logger.info(
        "Report written to %s (%d departments, %d employees)",
        path,
        report["departments"],
        report["employees"],
    )
    return path
