import dataclasses

import pytest

from profile_service.entities import Profile, PutProfileRequest


def test_profile_requires_username():
    with pytest.raises(ValueError, match="non-empty"):
        Profile(username="", first_name="Foo", last_name="Bar")


def test_profile_equality_covers_all_fields():
    assert Profile("foobar", "Foo", "Bar") == Profile("foobar", "Foo", "Bar")
    assert Profile("foobar", "Foo", "Bar") != Profile("foobar", "Foo", "Baz")


def test_profile_is_immutable():
    profile = Profile("foobar", "Foo", "Bar")

    with pytest.raises(dataclasses.FrozenInstanceError):
        profile.first_name = "Changed"  # type: ignore[misc]


def test_put_request_takes_username_from_caller():
    put_request = PutProfileRequest(first_name="Foo1", last_name="Bar1")

    assert put_request.to_profile("foobar") == Profile("foobar", "Foo1", "Bar1")


def test_put_request_has_no_username_field():
    field_names = {f.name for f in dataclasses.fields(PutProfileRequest)}

    assert field_names == {"first_name", "last_name"}
