"""Adapters (infrastructure) for company-track.

Provide concrete implementations of the outbound ports (company store, id
generators, unit of work) plus the SQLAlchemy engine and schema.

Dependency rule: may import `company_track.domain` and
`company_track.interfaces`; the domain must not import this package.
"""
