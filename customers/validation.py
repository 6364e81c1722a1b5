"""
Validation rules for incoming customer records.

Rules run in a fixed order and the first one that fails is the only error
reported for that record:

1. first and last name present (whitespace-only counts as missing)
2. age positive
3. age over 18
4. id positive
5. id not already taken
"""

from typing import Collection, Optional

from customers.models import Customer

MINIMUM_AGE = 18


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_customer(customer: Customer, taken_ids: Collection[int]) -> Optional[str]:
    """
    Check a candidate against the rules above.

    Args:
        customer: The candidate record.
        taken_ids: IDs already stored plus IDs accepted earlier in the batch.

    Returns:
        The error message for the first failed rule, or None if valid.
    """
    if _is_blank(customer.first_name) or _is_blank(customer.last_name):
        return f"Customer ID {customer.id}: First name and last name cannot be empty."

    if customer.age <= 0:
        return f"Customer ID {customer.id}: Age must be a positive number."

    if customer.age <= MINIMUM_AGE:
        return f"Customer ID {customer.id}: Age must be over {MINIMUM_AGE}."

    if customer.id <= 0:
        return f"Customer ID {customer.id}: ID must be a positive number."

    if customer.id in taken_ids:
        return f"Customer ID {customer.id} already exists."

    return None
