# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Relief registry: needs assessment and resource registration for disaster relief.
"""

from .models import (
    ResourceType,
    NeedPriority,
    NeedStatus,
    ResourceStatus,
    Need,
    Resource,
    CallResult
)
from .domain.errors import (
    RegistryException,
    InvalidResourceTypeError,
    InvalidQuantityError,
    InvalidPriorityError,
    InvalidStatusError,
    NotFoundError,
    UnauthorizedError
)
from .services import RecordStore, NeedsRegistry, ResourceRegistry

__version__ = "1.0.0"

__all__ = [
    "ResourceType",
    "NeedPriority",
    "NeedStatus",
    "ResourceStatus",
    "Need",
    "Resource",
    "CallResult",
    "RegistryException",
    "InvalidResourceTypeError",
    "InvalidQuantityError",
    "InvalidPriorityError",
    "InvalidStatusError",
    "NotFoundError",
    "UnauthorizedError",
    "RecordStore",
    "NeedsRegistry",
    "ResourceRegistry"
]
