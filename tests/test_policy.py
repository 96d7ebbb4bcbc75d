from datetime import datetime, timezone
from itertools import product

import pytest

from mixtape_app.core import (
    AuthenticationError,
    AuthorizationError,
    Mixtape,
    can_delete,
    can_read,
    can_write,
    ensure_deletable,
    ensure_readable,
    ensure_writable,
    filter_mutable_fields,
)


def _make_mixtape(
    is_public: bool = False,
    created_by: str = "u1",
    collaborators=("u2",),
) -> Mixtape:
    return Mixtape(
        id="m1",
        title="Road trip",
        created_by=created_by,
        created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
        collaborators=list(collaborators),
        is_public=is_public,
    )


USERS = ["u1", "u2", "u3", None]


@pytest.mark.parametrize("is_public,user", list(product([True, False], USERS)))
def test_can_read_matches_definition(is_public, user) -> None:
    mixtape = _make_mixtape(is_public=is_public)

    expected = is_public or user == "u1" or user in mixtape.collaborators

    assert can_read(mixtape, user) is expected


@pytest.mark.parametrize("is_public,user", list(product([True, False], USERS)))
def test_can_write_ignores_public_flag(is_public, user) -> None:
    mixtape = _make_mixtape(is_public=is_public)

    assert can_write(mixtape, user) is (user in ("u1", "u2"))


def test_scenario_private_mixtape_with_one_collaborator() -> None:
    m1 = _make_mixtape(is_public=False, created_by="u1", collaborators=["u2"])

    assert can_read(m1, "u2") is True
    assert can_read(m1, "u3") is False
    assert can_write(m1, "u2") is True
    assert can_delete(m1, "u2") is False
    assert can_delete(m1, "u1") is True


def test_anonymous_can_read_public_but_never_write_or_delete() -> None:
    mixtape = _make_mixtape(is_public=True)

    assert can_read(mixtape, None) is True
    assert can_write(mixtape, None) is False
    assert can_delete(mixtape, None) is False


def test_filter_mutable_fields_collaborator_strips_owner_only_fields() -> None:
    mixtape = _make_mixtape()
    proposed = {
        "title": "Hijacked",
        "isPublic": True,
        "collaborators": ["u2", "u9"],
        "createdBy": "u2",
        "note": "new note",
        "tracks": [],
        "description": "desc",
    }

    result = filter_mutable_fields(mixtape, "u2", proposed)

    assert result == {"note": "new note", "tracks": [], "description": "desc"}
    # Input is left untouched.
    assert "title" in proposed


def test_filter_mutable_fields_owner_strips_nothing() -> None:
    mixtape = _make_mixtape()
    proposed = {"title": "Renamed", "isPublic": True, "collaborators": [], "note": "x"}

    result = filter_mutable_fields(mixtape, "u1", proposed)

    assert result == proposed
    assert result is not proposed


def test_ensure_helpers_raise_distinct_errors() -> None:
    mixtape = _make_mixtape()

    with pytest.raises(AuthorizationError):
        ensure_readable(mixtape, "u3")
    with pytest.raises(AuthenticationError):
        ensure_writable(mixtape, None)
    with pytest.raises(AuthorizationError):
        ensure_writable(mixtape, "u3")
    with pytest.raises(AuthorizationError):
        ensure_deletable(mixtape, "u2")

    ensure_readable(mixtape, "u2")
    ensure_writable(mixtape, "u2")
    ensure_deletable(mixtape, "u1")


def test_collaborators_are_deduplicated() -> None:
    mixtape = _make_mixtape(collaborators=["u2", "u4", "u2"])

    assert mixtape.collaborators == ["u2", "u4"]
