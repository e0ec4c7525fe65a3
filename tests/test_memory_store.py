"""Tests for InMemoryProfileStore."""

from profile_service.entities import Profile
from profile_service.repositories import InMemoryProfileStore


class TestInMemoryProfileStore:
    def test_get_missing_returns_none(self, memory_store):
        assert memory_store.get("nobody") is None

    def test_upsert_inserts_then_replaces(self, memory_store, sample_profile):
        memory_store.upsert(sample_profile)
        memory_store.upsert(Profile("foobar", "Foo1", "Bar1"))

        assert memory_store.get("foobar") == Profile("foobar", "Foo1", "Bar1")
        assert len(memory_store) == 1

    def test_insert_if_absent(self, memory_store, sample_profile):
        assert memory_store.insert_if_absent(sample_profile) is True
        assert memory_store.insert_if_absent(Profile("foobar", "X", "Y")) is False
        assert memory_store.get("foobar") == sample_profile

    def test_advertises_atomic_insert(self):
        assert InMemoryProfileStore.supports_atomic_insert is True

    def test_seeded_profiles(self, sample_profile):
        store = InMemoryProfileStore([sample_profile, Profile("other", "O", "E")])

        assert store.get("foobar") == sample_profile
        assert len(store) == 2

    def test_clear(self, memory_store, sample_profile):
        memory_store.upsert(sample_profile)
        memory_store.clear()

        assert memory_store.get("foobar") is None
        assert len(memory_store) == 0
