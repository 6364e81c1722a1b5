"""Customer store exceptions – raised by CustomerStore, translated by the API."""

from typing import Optional


class CustomerStoreError(Exception):
    """Base for all customer store errors."""
    pass


class InvalidRequestError(CustomerStoreError):
    """The batch was empty or missing."""

    def __init__(self, message: str = "No customers provided in the request body."):
        super().__init__(message)


class CustomerValidationError(CustomerStoreError):
    """
    One or more records in a batch failed validation.

    Records from the same batch that passed validation are already in the
    store when this is raised; they are listed in ``inserted``.
    """

    def __init__(self, errors: list[str], inserted: Optional[list] = None):
        self.errors = list(errors)
        self.inserted = list(inserted or [])
        super().__init__("\n".join(self.errors))


class InternalError(CustomerStoreError):
    """Unexpected fault while reading or mutating the store."""
    pass
