# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Call result envelope returned by every registry operation.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field

from .entities import RegistryRecord


class CallResult(BaseModel):
    """Either ``{"value": ...}`` on success or ``{"error": code}`` on failure."""

    value: Any = Field(None, description="Operation result; None for unknown reads")
    error: Optional[int] = Field(None, description="Numeric error code")
    error_type: Optional[str] = Field(None, description="Error kind identifier")
    message: Optional[str] = Field(None, description="Human-readable error detail")

    @classmethod
    def success(cls, value: Any = None) -> "CallResult":
        return cls(value=value)

    @classmethod
    def failure(cls, exc) -> "CallResult":
        """Build a failed result from a RegistryException."""
        return cls(error=exc.code, error_type=exc.error_type, message=exc.message)

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        """Render the envelope in its wire shape."""
        if not self.ok:
            return {"error": self.error}
        if isinstance(self.value, RegistryRecord):
            return {"value": self.value.to_dict()}
        return {"value": self.value}
