# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Pytest configuration and fixtures.
"""

import os
import pytest

from relief_registry.models.enums import ResourceType, NeedPriority
from relief_registry.services import NeedsRegistry, ResourceRegistry

# Set test environment
os.environ['ENVIRONMENT'] = 'test'

BLOCK_HEIGHT = 100


@pytest.fixture
def requester():
    """Principal posting needs and owning resources."""
    return 'ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM'


@pytest.fixture
def other_user():
    """Principal that owns nothing."""
    return 'ST2PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM'


@pytest.fixture
def block_height():
    """Logical timestamp used for registrations."""
    return BLOCK_HEIGHT


@pytest.fixture
def needs_registry():
    """Fresh needs registry with an empty store."""
    return NeedsRegistry()


@pytest.fixture
def resource_registry():
    """Fresh resource registry with an empty store."""
    return ResourceRegistry()


@pytest.fixture
def sample_need_data(requester, block_height):
    """Arguments for a valid need registration."""
    return {
        "resource_type": ResourceType.WATER,
        "quantity": 500,
        "location": "Miami",
        "priority": NeedPriority.HIGH,
        "description": "Urgent need for clean water after hurricane",
        "caller": requester,
        "block_height": block_height
    }


@pytest.fixture
def sample_resource_data(requester, block_height):
    """Arguments for a valid resource registration."""
    return {
        "resource_type": ResourceType.WATER,
        "quantity": 100,
        "location": "New York",
        "caller": requester,
        "block_height": block_height
    }


@pytest.fixture
def registered_need(needs_registry, sample_need_data):
    """Needs registry holding one need with id 1."""
    result = needs_registry.register_need(**sample_need_data)
    assert result.value == 1
    return needs_registry


@pytest.fixture
def registered_resource(resource_registry, sample_resource_data):
    """Resource registry holding one resource with id 1."""
    result = resource_registry.register_resource(**sample_resource_data)
    assert result.value == 1
    return resource_registry
