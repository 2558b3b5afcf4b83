"""Integration tests against SQLite."""
