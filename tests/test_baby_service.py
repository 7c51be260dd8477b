"""Tests for baby profile service."""

from uuid import uuid4

from feeding_tracker.services.babies import BabyService
from tests.conftest import InMemoryBabyRepository


def test_create_baby_normalizes_allergies() -> None:
    service = BabyService(InMemoryBabyRepository())

    baby = service.create_baby(
        {
            "name": "Ada",
            "date_of_birth": "2024-01-01",
            "known_allergies": [" Peanut ", "peanut", "Egg", ""],
            "suspected_allergies": ["Milk"],
        }
    )

    assert baby.known_allergies == frozenset({"Peanut", "Egg"})
    assert baby.suspected_allergies == frozenset({"Milk"})
    assert service.list_babies() == [baby]


def test_update_baby_applies_partial_changes() -> None:
    service = BabyService(InMemoryBabyRepository())
    baby = service.create_baby({"name": "Ada", "date_of_birth": "2024-01-01"})

    updated = service.update_baby(baby.id, {"pediatrician_contact": "Dr. Lee"})

    assert updated is not None
    assert updated.name == "Ada"
    assert updated.pediatrician_contact == "Dr. Lee"
    assert service.update_baby(uuid4(), {"name": "Nobody"}) is None


def test_delete_baby_reports_missing() -> None:
    service = BabyService(InMemoryBabyRepository())
    baby = service.create_baby({"name": "Ada", "date_of_birth": "2024-01-01"})

    assert service.delete_baby(baby.id) is True
    assert service.delete_baby(baby.id) is False
    assert service.get_baby(baby.id) is None
