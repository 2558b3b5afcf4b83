"""company-track

A small interactive tool that records a company's departments and employees.
Changes are captured as domain events on an in-memory aggregate and flushed
to a local SQLite database; listings and a JSON distribution report are
derived from the same aggregate.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
