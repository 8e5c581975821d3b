# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Registry error taxonomy.

Codes are the ones the ledger logic returns: range errors raised by update
calls share code 1, so ``error_type`` is the unambiguous identifier.
"""

ERR_INVALID_RESOURCE_TYPE = 1
ERR_INVALID_QUANTITY = 2
ERR_INVALID_PRIORITY = 3
ERR_INVALID_VALUE = 1
ERR_UNAUTHORIZED = 403
ERR_NOT_FOUND = 404


class RegistryException(Exception):
    """Base class for registry call failures."""

    def __init__(self, message: str, code: int, error_type: str = "registry-error"):
        super().__init__(message)
        self.message = message
        self.code = code
        self.error_type = error_type


class InvalidResourceTypeError(RegistryException):
    """Resource type outside the ResourceType range."""

    def __init__(self, message: str):
        super().__init__(message, ERR_INVALID_RESOURCE_TYPE, "invalid-resource-type")


class InvalidQuantityError(RegistryException):
    """Quantity not strictly positive."""

    def __init__(self, message: str):
        super().__init__(message, ERR_INVALID_QUANTITY, "invalid-quantity")


class InvalidPriorityError(RegistryException):
    """Priority outside the NeedPriority range."""

    def __init__(self, message: str, code: int = ERR_INVALID_PRIORITY):
        super().__init__(message, code, "invalid-priority")


class InvalidStatusError(RegistryException):
    """Status outside the registry's status range."""

    def __init__(self, message: str):
        super().__init__(message, ERR_INVALID_VALUE, "invalid-status")


class NotFoundError(RegistryException):
    """Referenced record id does not exist."""

    def __init__(self, message: str):
        super().__init__(message, ERR_NOT_FOUND, "not-found")


class UnauthorizedError(RegistryException):
    """Caller is not the recorded requester or owner."""

    def __init__(self, message: str):
        super().__init__(message, ERR_UNAUTHORIZED, "unauthorized")
