from __future__ import annotations

import dataclasses
import pickle
from datetime import UTC, datetime, timedelta, timezone

import pytest

from modelentities.domain.entities.base import PojoBase, restore_entity
from modelentities.domain.entities.entity_a import EntityA
from modelentities.domain.exceptions import DomainError, IncompatibleSerialVersionError


def test_entity_a_default_construction_matches_base_defaults() -> None:
    entity = EntityA()

    assert entity is not None
    assert entity.field_values() == PojoBase().field_values()
    assert entity.id is None
    assert entity.version is None
    assert entity.created is None
    assert entity.updated is None
    assert entity.is_new is True


def test_entity_a_adds_no_attributes_of_its_own() -> None:
    assert [f.name for f in dataclasses.fields(EntityA)] == ["id", "version", "created", "updated"]
    assert isinstance(EntityA(), PojoBase)


def test_entity_a_serial_version_marker_is_stable() -> None:
    assert EntityA.serial_version_uid == 1
    assert "serial_version_uid" not in EntityA().field_values()


def test_entity_a_is_immutable_and_updated_via_replace() -> None:
    entity = EntityA()

    with pytest.raises(dataclasses.FrozenInstanceError):
        entity.id = 5  # type: ignore[misc]

    persisted = dataclasses.replace(entity, id=5, version=1)
    assert persisted.id == 5
    assert persisted.is_new is False
    assert entity.id is None


def test_naive_timestamps_are_normalized_to_utc() -> None:
    naive = datetime(2025, 1, 1, 12, 0)

    entity = EntityA(created=naive, updated=naive)

    assert entity.created is not None and entity.created.tzinfo is UTC
    assert entity.updated is not None and entity.updated.tzinfo is UTC


def test_pickle_round_trip_preserves_equality() -> None:
    entity = EntityA(id=7, version=2, created=datetime(2025, 1, 1, tzinfo=UTC))

    restored = pickle.loads(pickle.dumps(entity))

    assert restored == entity
    assert type(restored) is EntityA


def test_restore_rejects_mismatched_serial_version() -> None:
    with pytest.raises(IncompatibleSerialVersionError) as excinfo:
        restore_entity(EntityA, 2, {"id": 1})

    err = excinfo.value
    assert isinstance(err, DomainError)
    assert err.code == "INCOMPATIBLE_SERIAL_VERSION"
    assert err.details == {"entity": "EntityA", "expected": 1, "found": 2}


def test_pickled_stream_from_other_layout_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    payload = pickle.dumps(EntityA(id=3))
    monkeypatch.setattr(EntityA, "serial_version_uid", 2)

    with pytest.raises(IncompatibleSerialVersionError):
        pickle.loads(payload)


def test_offset_timestamps_are_converted_to_utc() -> None:
    ts = datetime(2025, 3, 1, 10, 0, tzinfo=timezone(timedelta(hours=5)))

    entity = EntityA(created=ts, updated=ts)

    assert entity.created == ts
    assert entity.created is not None and entity.created.tzinfo is UTC
    assert entity.created.hour == 5
    assert entity.updated is not None and entity.updated.tzinfo is UTC
