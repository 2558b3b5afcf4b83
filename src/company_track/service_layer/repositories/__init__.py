"""Package for repository implementations."""

from .company import CompanyRepository

__all__ = ["CompanyRepository"]
