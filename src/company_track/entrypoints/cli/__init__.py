"""Command-line interface for company-track."""
