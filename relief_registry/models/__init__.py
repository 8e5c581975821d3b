# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Models package - Pydantic records, enumerations and the call result envelope.
"""

# Enumerations
from .enums import ResourceType, NeedPriority, NeedStatus, ResourceStatus

# Records
from .entities import RegistryRecord, Need, Resource

# Results
from .responses import CallResult

__all__ = [
    # Enumerations
    "ResourceType",
    "NeedPriority",
    "NeedStatus",
    "ResourceStatus",

    # Records
    "RegistryRecord",
    "Need",
    "Resource",

    # Results
    "CallResult"
]
