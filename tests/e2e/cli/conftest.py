"""Fixtures and helpers for end-to-end CLI tests.

Each test runs the `company-track` command in an isolated working directory
with the flight recorder disabled and no inherited environment overrides.
"""

from collections.abc import Callable

import pytest
from click.testing import CliRunner, Result

from company_track.entrypoints.cli.main import company_track

# pylint: disable=redefined-outer-name

CLEAN_ENV = {"PRODUCTION": None, "COMPANY_TRACK_DB_URL": None}


def menu_input(*lines: str) -> str:
    """Join answers to successive prompts into CliRunner input."""
    return "".join(f"{line}\n" for line in lines)


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside a fresh temporary working directory."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def run_cli(runner, fs) -> Callable[..., Result]:
    """Invoke company-track with the given answers, args and env overrides."""

    def _run(
        *answers: str, args: list[str] | None = None, env: dict | None = None
    ) -> Result:
        return runner.invoke(
            company_track,
            ["--no-flight-recorder", *(args or [])],
            input=menu_input(*answers),
            env={**CLEAN_ENV, **(env or {})},
        )

    return _run
