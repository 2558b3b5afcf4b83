"""Bootstrap (composition root) for company-track.

Assembles the application at runtime: creates the engine, makes sure the
company tables exist, loads the Company aggregate once, and wires concrete
adapters into the service-layer handlers behind a message bus.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- Inner layers must not import `company_track.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
