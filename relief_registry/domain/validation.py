# SPDX-License-Identifier: Apache-2.0

"""
Validation helpers shared by both registries.

These are pure functions: each either returns the validated value as a plain
``int`` or raises the matching RegistryException. Registries call them in the
order that defines which error a caller sees first.
"""

from typing import Any, Optional, Type
from enum import IntEnum

from ..models.enums import ResourceType, NeedPriority
from ..models.entities import RegistryRecord
from .errors import (
    ERR_INVALID_PRIORITY,
    InvalidResourceTypeError,
    InvalidQuantityError,
    InvalidPriorityError,
    InvalidStatusError,
    NotFoundError,
    UnauthorizedError,
)


def _is_integer(value: Any) -> bool:
    # bool is an int subclass but never a valid enum value or quantity
    return isinstance(value, int) and not isinstance(value, bool)


def in_enum_range(value: Any, enum_cls: Type[IntEnum]) -> bool:
    """
    Check whether a value lies within the contiguous range of an IntEnum.

    Args:
        value: Candidate value (enum member or plain int)
        enum_cls: Enumeration defining the valid range

    Returns:
        True if value is an integer between the smallest and largest member
    """
    if not _is_integer(value):
        return False
    values = [member.value for member in enum_cls]
    return min(values) <= value <= max(values)


def validate_resource_type(resource_type: Any) -> int:
    """Validate a ResourceType value."""
    if not in_enum_range(resource_type, ResourceType):
        raise InvalidResourceTypeError(f"Invalid resource type: {resource_type!r}")
    return int(resource_type)


def validate_quantity(quantity: Any) -> int:
    """Validate that a quantity is a strictly positive integer."""
    if not _is_integer(quantity) or quantity <= 0:
        raise InvalidQuantityError(f"Quantity must be greater than zero: {quantity!r}")
    return int(quantity)


def validate_priority(priority: Any, code: int = ERR_INVALID_PRIORITY) -> int:
    """Validate a NeedPriority value; ``code`` selects the reported error code."""
    if not in_enum_range(priority, NeedPriority):
        raise InvalidPriorityError(f"Invalid priority: {priority!r}", code)
    return int(priority)


def validate_status(status: Any, status_enum: Type[IntEnum]) -> int:
    """Validate a status value against the registry's status enum."""
    if not in_enum_range(status, status_enum):
        raise InvalidStatusError(f"Invalid {status_enum.__name__}: {status!r}")
    return int(status)


def require_record(record: Optional[RegistryRecord], record_id: Any, kind: str) -> RegistryRecord:
    """Raise NotFoundError when a lookup returned nothing."""
    if record is None:
        raise NotFoundError(f"{kind} {record_id!r} not found")
    return record


def require_principal(recorded: str, caller: str, kind: str) -> None:
    """Raise UnauthorizedError unless the caller is the recorded principal."""
    if recorded != caller:
        raise UnauthorizedError(f"Caller is not the {kind} of this record")
