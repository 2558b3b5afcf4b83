"""Domain layer for company-track.

Contains business rules: entities, domain events, errors and the `Company`
aggregate. This package is deliberately technology-agnostic.

Dependency rule: do not import from `company_track.adapters` or
`company_track.entrypoints`.
"""
