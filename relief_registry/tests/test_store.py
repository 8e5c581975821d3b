# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for the record store.
"""

import pytest

from relief_registry.models.entities import Resource
from relief_registry.services.store import RecordStore


def _resource(record_id):
    return Resource(id=record_id, owner="A", resource_type=1, quantity=1, location="x", last_updated=0)


class TestRecordStore:
    """Test RecordStore id allocation and lookups."""

    def test_initial_state(self):
        store = RecordStore()
        assert len(store) == 0
        assert store.last_id == 0
        assert store.get(1) is None

    def test_allocate_assigns_sequential_ids(self):
        store = RecordStore()
        first = store.allocate(_resource)
        second = store.allocate(_resource)

        assert (first.id, second.id) == (1, 2)
        assert store.last_id == 2
        assert store.get(2) is second
        assert store.contains(1)

    def test_failed_build_consumes_no_id(self):
        """Test the counter only advances after a successful build."""
        store = RecordStore()

        def failing_build(record_id):
            raise ValueError("bad record")

        with pytest.raises(ValueError):
            store.allocate(failing_build)

        assert store.last_id == 0
        assert len(store) == 0
        assert store.allocate(_resource).id == 1

    def test_put_replaces_existing_record(self):
        store = RecordStore()
        store.allocate(_resource)
        store.put(_resource(1).model_copy(update={"quantity": 9}))

        assert len(store) == 1
        assert store.get(1).quantity == 9

    def test_unhashable_id_is_not_found(self):
        store = RecordStore()
        store.allocate(_resource)
        assert store.get([1]) is None

    def test_clear_resets_counter(self):
        store = RecordStore()
        store.allocate(_resource)
        store.clear()

        assert len(store) == 0
        assert store.last_id == 0
        assert store.allocate(_resource).id == 1
