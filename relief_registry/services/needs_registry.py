# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Needs assessment registry: requesters post relief needs and manage them.
"""

import logging
from typing import Any, Optional

from ..domain.errors import ERR_INVALID_VALUE
from ..domain.validation import (
    validate_resource_type,
    validate_quantity,
    validate_priority,
    validate_status,
    require_record,
    require_principal,
)
from ..models.entities import Need
from ..models.enums import NeedStatus
from ..models.responses import CallResult
from .store import BaseRegistry, RecordStore

logger = logging.getLogger(__name__)


class NeedsRegistry(BaseRegistry[Need]):
    """Registry of relief needs keyed by sequential id."""

    name = "needs"

    def __init__(self, store: Optional[RecordStore[Need]] = None):
        super().__init__(store)

    @property
    def last_need_id(self) -> int:
        return self.store.last_id

    @property
    def need_count(self) -> int:
        return len(self.store)

    def register_need(
        self,
        resource_type: Any,
        quantity: Any,
        location: str,
        priority: Any,
        description: str,
        caller: str,
        block_height: int
    ) -> CallResult:
        """
        Register a new need posted by ``caller``.

        Args:
            resource_type: ResourceType value (1-5)
            quantity: Units needed, must be positive
            location: Free-text location
            priority: NeedPriority value (1-4)
            description: Free-text description
            caller: Principal posting the need
            block_height: Logical timestamp of the call

        Returns:
            CallResult with the new need id, or the first validation error
        """
        def call():
            fields = {
                "resource_type": validate_resource_type(resource_type),
                "quantity": validate_quantity(quantity),
                "priority": validate_priority(priority),
                "requester": caller,
                "location": location,
                "status": int(NeedStatus.OPEN),
                "description": description,
                "created_at": block_height,
                "last_updated": block_height
            }
            need = self.store.allocate(lambda new_id: Need(id=new_id, **fields))
            logger.info(
                f"Need {need.id} registered",
                extra={"need_id": need.id, "requester": caller, "resource_type": need.resource_type}
            )
            return need.id

        return self._execute("register_need", call, caller=caller)

    def update_need_status(self, need_id: Any, new_status: Any, caller: str, block_height: int) -> CallResult:
        """Set the status of a need. Only its requester may do so."""
        def call():
            need = self._owned_need(need_id, caller)
            status = validate_status(new_status, NeedStatus)
            self._replace(need, block_height, status=status)
            return True

        return self._execute("update_need_status", call, record_id=need_id, caller=caller)

    def update_need_priority(self, need_id: Any, new_priority: Any, caller: str, block_height: int) -> CallResult:
        """Set the priority of a need. Only its requester may do so."""
        def call():
            need = self._owned_need(need_id, caller)
            priority = validate_priority(new_priority, ERR_INVALID_VALUE)
            self._replace(need, block_height, priority=priority)
            return True

        return self._execute("update_need_priority", call, record_id=need_id, caller=caller)

    def get_need(self, need_id: Any) -> CallResult:
        """Read a need; unknown ids yield a successful result with value None."""
        return self._execute("get_need", lambda: self.store.get(need_id), record_id=need_id)

    def _owned_need(self, need_id: Any, caller: str) -> Need:
        # existence is checked before ownership
        need = require_record(self.store.get(need_id), need_id, "Need")
        require_principal(need.requester, caller, "requester")
        return need

    def _replace(self, need: Need, block_height: int, **changes: Any) -> None:
        self.store.put(need.model_copy(update={**changes, "last_updated": block_height}))
        logger.info(
            f"Need {need.id} updated",
            extra={"need_id": need.id, "changes": changes, "block_height": block_height}
        )
