# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Resource registration registry: owners register available relief supplies.
"""

import logging
from typing import Any, Optional

from ..domain.validation import (
    validate_resource_type,
    validate_quantity,
    validate_status,
    require_record,
    require_principal,
)
from ..models.entities import Resource
from ..models.enums import ResourceStatus
from ..models.responses import CallResult
from .store import BaseRegistry, RecordStore

logger = logging.getLogger(__name__)


class ResourceRegistry(BaseRegistry[Resource]):
    """Registry of relief resources keyed by sequential id."""

    name = "resources"

    def __init__(self, store: Optional[RecordStore[Resource]] = None):
        super().__init__(store)

    @property
    def last_resource_id(self) -> int:
        return self.store.last_id

    @property
    def resource_count(self) -> int:
        return len(self.store)

    def register_resource(
        self,
        resource_type: Any,
        quantity: Any,
        location: str,
        caller: str,
        block_height: int
    ) -> CallResult:
        """
        Register a supply owned by ``caller``.

        Returns:
            CallResult with the new resource id, or the first validation error
        """
        def call():
            fields = {
                "resource_type": validate_resource_type(resource_type),
                "quantity": validate_quantity(quantity),
                "owner": caller,
                "location": location,
                "status": int(ResourceStatus.AVAILABLE),
                "last_updated": block_height
            }
            resource = self.store.allocate(lambda new_id: Resource(id=new_id, **fields))
            logger.info(
                f"Resource {resource.id} registered",
                extra={"resource_id": resource.id, "owner": caller, "quantity": resource.quantity}
            )
            return resource.id

        return self._execute("register_resource", call, caller=caller)

    def update_quantity(self, resource_id: Any, new_quantity: Any, caller: str, block_height: int) -> CallResult:
        def call():
            resource = self._owned_resource(resource_id, caller)
            quantity = validate_quantity(new_quantity)
            self._replace(resource, block_height, quantity=quantity)
            return True

        return self._execute("update_quantity", call, record_id=resource_id, caller=caller)

    def update_status(self, resource_id: Any, new_status: Any, caller: str, block_height: int) -> CallResult:
        def call():
            resource = self._owned_resource(resource_id, caller)
            status = validate_status(new_status, ResourceStatus)
            self._replace(resource, block_height, status=status)
            return True

        return self._execute("update_status", call, record_id=resource_id, caller=caller)

    def get_resource(self, resource_id: Any) -> CallResult:
        """Unauthenticated read; None for unknown ids."""
        return self._execute("get_resource", lambda: self.store.get(resource_id), record_id=resource_id)

    def _owned_resource(self, resource_id: Any, caller: str) -> Resource:
        resource = require_record(self.store.get(resource_id), resource_id, "Resource")
        require_principal(resource.owner, caller, "owner")
        return resource

    def _replace(self, resource: Resource, block_height: int, **changes: Any) -> None:
        self.store.put(resource.model_copy(update={**changes, "last_updated": block_height}))
        logger.info(
            f"Resource {resource.id} updated",
            extra={"resource_id": resource.id, "changes": changes, "block_height": block_height}
        )
