# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Services package - Stateful registries and their record store.
"""

from .store import RecordStore, BaseRegistry
from .needs_registry import NeedsRegistry
from .resource_registry import ResourceRegistry

__all__ = [
    "RecordStore",
    "BaseRegistry",
    "NeedsRegistry",
    "ResourceRegistry"
]
