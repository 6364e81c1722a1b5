"""
Customer list core.

This package contains everything the HTTP layer builds on:
- Customer model with case-insensitive field binding
- Ordered validation rules for incoming records
- CustomerStore, the sorted JSON-backed collection
- Settings loaded from the environment
"""

from customers.models import Customer
from customers.errors import (
    CustomerStoreError,
    InvalidRequestError,
    CustomerValidationError,
    InternalError,
)
from customers.data_store import CustomerStore, AppendResult
from customers.config import Settings, get_settings

__all__ = [
    "Customer",
    "CustomerStoreError",
    "InvalidRequestError",
    "CustomerValidationError",
    "InternalError",
    "CustomerStore",
    "AppendResult",
    "Settings",
    "get_settings",
]
