from __future__ import annotations


class CompanyServiceError(Exception):
    """Base class for company store and service failures."""


class DataLoadError(CompanyServiceError):
    """The company document is missing, unreadable or malformed."""


class SearchError(CompanyServiceError):
    """A search could not scan the collection."""


class UpdateError(CompanyServiceError):
    """Applying changes to a company or saving the collection failed."""
