# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
In-memory record store and the registry base class built on it.
"""

import logging
from typing import Any, Callable, Dict, Generic, Optional, TypeVar
from opentelemetry import trace

from ..domain.errors import RegistryException
from ..models.entities import RegistryRecord
from ..models.responses import CallResult

tracer = trace.get_tracer(__name__)
logger = logging.getLogger(__name__)

R = TypeVar('R', bound=RegistryRecord)


class RecordStore(Generic[R]):
    """Id-keyed record mapping with its own sequential id counter."""

    def __init__(self):
        self._records: Dict[int, R] = {}
        self._last_id = 0

    @property
    def last_id(self) -> int:
        return self._last_id

    def allocate(self, build: Callable[[int], R]) -> R:
        """
        Store a new record built for the next sequential id.

        The counter only advances once ``build`` returns, so a build that
        raises leaves both the counter and the mapping untouched.
        """
        new_id = self._last_id + 1
        record = build(new_id)
        self._records[new_id] = record
        self._last_id = new_id
        return record

    def get(self, record_id: Any) -> Optional[R]:
        try:
            return self._records.get(record_id)
        except TypeError:
            # unhashable ids cannot be stored keys
            return None

    def contains(self, record_id: Any) -> bool:
        return self.get(record_id) is not None

    def put(self, record: R) -> None:
        self._records[record.id] = record

    def clear(self) -> None:
        """Reset to an empty store with the counter at zero."""
        self._records.clear()
        self._last_id = 0

    def __len__(self) -> int:
        return len(self._records)


class BaseRegistry(Generic[R]):
    """
    Shared call handling for registries.

    Every public operation runs through ``_execute``, which opens a span,
    converts RegistryException into a failed CallResult and logs the outcome.
    """

    name = "registry"

    def __init__(self, store: Optional[RecordStore[R]] = None):
        self.store: RecordStore[R] = store if store is not None else RecordStore()

    def __len__(self) -> int:
        return len(self.store)

    def _execute(self, operation: str, call: Callable[[], Any], **attributes: Any) -> CallResult:
        with tracer.start_as_current_span(f"{self.name}.{operation}") as span:
            span.set_attributes({
                f"registry.{key}": str(value) for key, value in attributes.items()
            })
            try:
                value = call()
            except RegistryException as e:
                span.set_attribute("registry.result", e.error_type)
                logger.warning(
                    f"{self.name}.{operation} rejected: {e.message}",
                    extra={
                        "registry": self.name,
                        "operation": operation,
                        "error_type": e.error_type,
                        "error_code": e.code,
                        **attributes
                    }
                )
                return CallResult.failure(e)

            span.set_attribute("registry.result", "ok")
            return CallResult.success(value)
