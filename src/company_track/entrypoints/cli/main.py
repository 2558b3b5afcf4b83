"""company-track CLI entry point.

Defines the ``company-track`` command (via Click-Extra). It has no
subcommands: its options only tune logging, and running it opens the
interactive menu.

Exit codes
- ``0`` when the user picks Quit.
- ``1`` when a storage or file error ends the session, or the prompt is aborted.

Examples
    $ company-track
    $ PRODUCTION=1 company-track -v
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir
from sqlalchemy.exc import SQLAlchemyError

from company_track import __version__, config
from company_track.bootstrap import bootstrap
from company_track.interfaces.company_store import CompanyStoreError
from company_track.logging import configure_logging, log_startup
from company_track.service_layer.repositories.errors import RepositoryError

from .helpers import error, sanitize_url
from .helpers.log_level_parser import parse_log_level
from .menu import run_menu

logger = logging.getLogger(__name__)


HELP = """Keep track of a company's departments and employees.

    Opens an interactive menu to add departments, hire employees, list them
    and write a JSON distribution report (report.json). Data is stored in
    db/company.dev.db, or db/company.prod.db when PRODUCTION is set.
    """

FLIGHT_RECORDER_CAPACITY = 2000
DEFAULT_LOG_PATH = (
    Path(user_log_dir("company-track", appauthor=False, ensure_exists=True))
    / "latest.log"
)

SESSION_ERRORS = (CompanyStoreError, RepositoryError, SQLAlchemyError, OSError)


@clickx.extra_command(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "-v",
    "--verbose",
    "verbose_count",
    count=True,
    help="Show more log output: -v for INFO, -vv for DEBUG.",
)
@click.option(
    "-q",
    "--quiet",
    "quiet_count",
    count=True,
    help="Show less log output: -q for ERROR, -qq for CRITICAL only.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Log everything to the console, with timestamps and source locations.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="COMPANY_TRACK_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    show_default=True,
    help=(
        f"Buffer the last {FLIGHT_RECORDER_CAPACITY} log records (DEBUG included) "
        "and write them to --log-path once a WARNING is logged."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    default=False,
    show_default=True,
    help="Also write the flight recorder buffer when the program exits.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    default=("sqlalchemy=WARNING",),
    callback=parse_log_level,
    show_default=True,
    help="Minimum level of one logger, as NAME=LEVEL (repeatable).",
)
@clickx.pass_context
def company_track(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """Keep track of a company's departments and employees."""
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))
    capacity = FLIGHT_RECORDER_CAPACITY if flight_recorder else None

    handlers = configure_logging(
        level=level,
        debug_mode=debug,
        color=ctx.color is not False,
        log_path=log_path,
        flight_capacity=capacity,
        flush_on_close=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=capacity,
        logger_levels=logger_levels,
    )
    ctx.call_on_close(logging.shutdown)

    try:
        url = config.get_db_url()
        logger.debug("Database: %s", sanitize_url(url))
        container = bootstrap(url)
        run_menu(container.message_bus)
    except SESSION_ERRORS as e:
        logger.debug("Session ended by %s", type(e).__name__, exc_info=True)
        error(f"Error running the program: {e}")
        ctx.exit(1)
