"""Entrypoints (inbound adapters) for company-track.

Expose the application to the outside world: currently the interactive CLI.
Parse and validate inputs, send commands through the message bus, and present
results.

Dependency rule: may import `company_track.bootstrap` and
`company_track.service_layer`; avoid importing `company_track.adapters` directly.
"""
