"""
JSON-backed customer store.

This module owns the customer list: an in-memory sequence kept sorted by
(last name, first name), loaded from a JSON file once at startup and
rewritten to that file after every append that changed it.

Design decisions:
- One store object per process, created by the application lifespan
  and handed to request handlers (no module-level list)
- A single lock covers validate + insert + save, so appends are atomic
  with respect to each other and reads see a consistent snapshot
- Storage faults are logged and never surface to callers: a bad file
  loads as an empty list, a failed write keeps the in-memory state
"""

import json
import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from pydantic import TypeAdapter

from customers.errors import (
    CustomerStoreError,
    CustomerValidationError,
    InternalError,
    InvalidRequestError,
)
from customers.models import Customer
from customers.validation import validate_customer

logger = logging.getLogger("customers.store")

_customer_list = TypeAdapter(list[Customer])


@dataclass
class AppendResult:
    """Outcome of a batch append that had no invalid records."""
    inserted: list[Customer] = field(default_factory=list)
    saved: bool = False


class CustomerStore:
    """
    Sorted customer collection persisted to a single JSON file.

    Ordering is case-insensitive ascending by last name, then first name.
    Records with equal keys keep the order in which they were appended.
    """

    def __init__(self, storage_file: Path):
        """
        Initialize the store and load the storage file.

        Args:
            storage_file: Path to the JSON file holding the customer list.
                          It does not need to exist yet.
        """
        self.storage_file = Path(storage_file)
        self._lock = threading.Lock()
        self._customers: list[Customer] = self._load()

    # =========================================================================
    # Persistence
    # =========================================================================

    def _load(self) -> list[Customer]:
        """Read the storage file, falling back to an empty list."""
        if not self.storage_file.exists():
            logger.info(f"No storage file at {self.storage_file}, starting empty")
            return []

        try:
            with open(self.storage_file, "r", encoding="utf-8") as f:
                data = json.load(f)
            customers = _customer_list.validate_python(data or [])
        except (OSError, ValueError) as e:
            logger.error(f"Error loading customers from {self.storage_file}: {e}")
            return []

        logger.info(f"Loaded {len(customers)} customers from {self.storage_file}")
        return customers

    def _save(self) -> bool:
        """
        Write the full list to the storage file.

        Writes to a sibling temp file first and swaps it in, so a crash
        mid-write leaves the previous file intact. Returns False on failure.
        """
        payload = [c.to_wire() for c in self._customers]
        tmp = self.storage_file.with_suffix(self.storage_file.suffix + ".tmp")
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
            tmp.replace(self.storage_file)
        except (OSError, ValueError) as e:
            logger.error(f"Error saving customers to {self.storage_file}: {e}")
            return False
        finally:
            tmp.unlink(missing_ok=True)
        return True

    def reload(self) -> None:
        """
        Replace the in-memory list with the storage file's contents.

        Useful for tests and tools that edit the file directly.
        """
        with self._lock:
            self._customers = self._load()

    # =========================================================================
    # Customer Operations
    # =========================================================================

    def get_customers(self) -> list[Customer]:
        """Get all customers in sort order."""
        try:
            with self._lock:
                return list(self._customers)
        except Exception as e:
            raise InternalError(f"Error getting customers: {e}") from e

    def add_customers(self, batch: Optional[Iterable[Customer]]) -> AppendResult:
        """
        Validate a batch and insert its valid records in sorted position.

        Each record is checked against the stored IDs plus the IDs accepted
        earlier in the same batch. Invalid records are skipped without
        stopping the batch. If anything was inserted the list is saved.

        Raises:
            InvalidRequestError: The batch is missing or empty.
            CustomerValidationError: At least one record was rejected. Records
                accepted from the same batch are already stored and saved.
            InternalError: Anything unexpected while processing.
        """
        candidates = list(batch or [])
        if not candidates:
            raise InvalidRequestError()

        try:
            with self._lock:
                return self._add_locked(candidates)
        except CustomerStoreError:
            raise
        except Exception as e:
            logger.exception("Error processing customers")
            raise InternalError(f"Error processing customers: {e}") from e

    def _add_locked(self, candidates: list[Customer]) -> AppendResult:
        taken_ids = {c.id for c in self._customers}
        inserted: list[Customer] = []
        errors: list[str] = []

        for candidate in candidates:
            error = validate_customer(candidate, taken_ids)
            if error:
                logger.warning(f"Rejected customer: {error}")
                errors.append(error)
                continue

            customer = candidate.model_copy()
            self._insert_sorted(customer)
            taken_ids.add(customer.id)
            inserted.append(customer)
            logger.info(f"Added customer {customer.id}: {customer.first_name} {customer.last_name}")

        saved = self._save() if inserted else False

        if errors:
            raise CustomerValidationError(errors, inserted=inserted)
        return AppendResult(inserted=inserted, saved=saved)

    def _insert_sorted(self, customer: Customer) -> None:
        """Insert before the first stored customer that sorts after it."""
        key = customer.sort_key()
        index = 0
        while index < len(self._customers):
            if key < self._customers[index].sort_key():
                break
            index += 1
        self._customers.insert(index, customer)

    def __len__(self) -> int:
        with self._lock:
            return len(self._customers)
