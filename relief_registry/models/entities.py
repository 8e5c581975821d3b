# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Registry record entities.

Records are immutable: a mutation stores an updated copy produced by
``model_copy(update=...)`` in place of the previous record.
"""

from typing import Any, Dict
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import NeedStatus, ResourceStatus


class RegistryRecord(BaseModel):
    """Base record with the fields common to both registries."""

    model_config = ConfigDict(
        # Serialize as resourceType, lastUpdated, ...
        alias_generator=to_camel,
        # Allow population by field name or alias
        populate_by_name=True,
        # Store plain ints rather than enum members
        use_enum_values=True,
        frozen=True
    )

    id: int = Field(..., ge=1, description="Sequential record identifier")
    resource_type: int = Field(..., ge=1, le=5, description="ResourceType value")
    quantity: int = Field(..., gt=0, description="Number of units")
    location: str = Field(..., description="Free-text location")
    last_updated: int = Field(..., description="Logical timestamp of the last mutation")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with camelCase field names."""
        return self.model_dump(by_alias=True)


class Need(RegistryRecord):
    """Relief need posted by a requester."""

    requester: str = Field(..., description="Principal that posted the need")
    priority: int = Field(..., ge=1, le=4, description="NeedPriority value")
    status: int = Field(default=NeedStatus.OPEN, ge=1, le=4, description="NeedStatus value")
    description: str = Field(..., description="Free-text description")
    created_at: int = Field(..., description="Logical timestamp of registration")


class Resource(RegistryRecord):
    """Relief supply registered by an owner."""

    owner: str = Field(..., description="Principal that registered the resource")
    status: int = Field(default=ResourceStatus.AVAILABLE, ge=1, le=3, description="ResourceStatus value")
