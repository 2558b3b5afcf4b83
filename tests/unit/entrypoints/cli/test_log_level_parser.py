"""Unit tests for the CLI log level parser.

These tests exercise company_track.entrypoints.cli.helpers.log_level_parser,
covering defaults, override order, comma/space separated input,
case-insensitivity and malformed input.
"""

import logging
import types

import click
import pytest

from company_track.entrypoints.cli.helpers.log_level_parser import (
    _normalize_items,
    parse_log_level,
)

# pylint: disable=protected-access


def make_ctx():
    """Create a minimal Click context stub (the callback ignores it)."""
    return types.SimpleNamespace()


def test_empty_uses_defaults():
    """When no levels are provided, return the default library logger levels."""
    assert parse_log_level(make_ctx(), None, ()) == {"sqlalchemy": logging.WARNING}


def test_repeated_flags_override_order():
    """Later repeated CLI flags override earlier ones for the same logger."""
    value = ("sqlalchemy=INFO", "company_track=DEBUG", "sqlalchemy=ERROR")
    out = parse_log_level(make_ctx(), None, value)
    assert out["sqlalchemy"] == logging.ERROR
    assert out["company_track"] == logging.DEBUG


def test_envvar_string_with_commas_and_spaces():
    """Accept a plain string (e.g. from an env var) with commas and spaces."""
    out = parse_log_level(
        make_ctx(), None, "sqlalchemy=INFO,  company_track=DEBUG  rich=ERROR"
    )
    assert out == {
        "sqlalchemy": logging.INFO,
        "company_track": logging.DEBUG,
        "rich": logging.ERROR,
    }


def test_case_insensitive_levels():
    """Level names should be parsed case-insensitively."""
    out = parse_log_level(make_ctx(), None, ("sqlalchemy=info", "rich=WaRnInG"))
    assert out["sqlalchemy"] == logging.INFO
    assert out["rich"] == logging.WARNING


def test_invalid_pair_raises():
    """Malformed NAME=LEVEL pairs should raise click.BadParameter."""
    with pytest.raises(click.BadParameter, match="Expected NAME=LEVEL"):
        parse_log_level(make_ctx(), None, ("not-a-pair",))


@pytest.mark.parametrize("level", ["LOUD", "basic_format"])
def test_invalid_level_raises(level):
    """Unknown level names, or logging attributes that are not levels, are rejected."""
    with pytest.raises(click.BadParameter, match="Invalid log level"):
        parse_log_level(make_ctx(), None, (f"sqlalchemy={level}",))


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("", []),
        ("a=INFO", ["a=INFO"]),
        (("a=INFO, b=DEBUG", "c=ERROR"), ["a=INFO", "b=DEBUG", "c=ERROR"]),
        (["  a=INFO  ", ",,"], ["a=INFO"]),
    ],
)
def test_normalize_items_flattens_in_order(value, expected):
    """Tuples, lists and strings flatten to non-empty items in the order given."""
    assert _normalize_items(value) == expected
