# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Enumeration types for the relief registries.
"""

from enum import IntEnum


class ResourceType(IntEnum):
    """Kinds of relief supplies shared by needs and resources (1-5)."""
    WATER = 1
    FOOD = 2
    SHELTER = 3
    MEDICAL = 4
    EQUIPMENT = 5


class NeedPriority(IntEnum):
    """Need urgency levels (1-4)."""
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4


class NeedStatus(IntEnum):
    """Need lifecycle status."""
    OPEN = 1
    IN_PROGRESS = 2
    FULFILLED = 3
    CANCELLED = 4


class ResourceStatus(IntEnum):
    """Resource availability status."""
    AVAILABLE = 1
    RESERVED = 2
    DEPLOYED = 3
