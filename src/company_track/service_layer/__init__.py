"""Service layer for company-track.

Orchestrates use cases: commands and their handlers, the message bus, the
company repository and the read-side views used by the CLI.
"""
