# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for the member store."""

import uuid

from roster.events import StoreEvent
from roster.models.enums import MemberType
from roster.schemas.member import Member


def create_member(store, name: str, member_type=MemberType.PROSPECT) -> Member:
    member = Member(name=name, member_type=member_type)
    store.create(member)
    return member


def test_create_then_lookup_returns_equal_member(member_store):
    member = create_member(member_store, "Emma")

    assert member_store.by_id(member.id) == member


def test_create_inserts_at_front(member_store):
    first = create_member(member_store, "Emma")
    second = create_member(member_store, "Olivia")

    assert [m.id for m in member_store.all()] == [second.id, first.id]


def test_by_id_unknown_returns_none(member_store):
    assert member_store.by_id(uuid.uuid4()) is None


def test_roster_and_prospects_partition_all(member_store):
    create_member(member_store, "Emma")
    create_member(member_store, "Sarah", MemberType.ROSTER_MEMBER)
    create_member(member_store, "Olivia")
    create_member(member_store, "Jessica", MemberType.ROSTER_MEMBER)

    roster_ids = {m.id for m in member_store.roster()}
    prospect_ids = {m.id for m in member_store.prospects()}

    assert roster_ids.isdisjoint(prospect_ids)
    assert roster_ids | prospect_ids == {m.id for m in member_store.all()}
    assert [m.name for m in member_store.roster()] == ["Jessica", "Sarah"]
    assert [m.name for m in member_store.prospects()] == ["Olivia", "Emma"]


def test_update_replaces_in_place(member_store):
    first = create_member(member_store, "Emma")
    create_member(member_store, "Olivia")

    changed = first.model_copy(update={"name": "Emma K", "notes": "Doctor"})
    assert member_store.update(changed) is True

    assert member_store.by_id(first.id) == changed
    assert [m.name for m in member_store.all()] == ["Olivia", "Emma K"]


def test_update_moves_member_between_views(member_store):
    member = create_member(member_store, "Emma")

    member_store.update(member.model_copy(update={"member_type": MemberType.ROSTER_MEMBER}))

    assert member_store.prospects() == []
    assert [m.id for m in member_store.roster()] == [member.id]


def test_update_unknown_is_noop(member_store):
    create_member(member_store, "Emma")

    assert member_store.update(Member(name="Ghost")) is False
    assert [m.name for m in member_store.all()] == ["Emma"]


def test_returned_members_are_copies(member_store):
    member = create_member(member_store, "Emma")

    fetched = member_store.by_id(member.id)
    fetched.name = "Changed"
    fetched.labels.add("Mutated")
    member.notes = "Changed after create"

    stored = member_store.by_id(member.id)
    assert stored.name == "Emma"
    assert stored.labels == set()
    assert stored.notes == ""


def test_delete(member_store):
    member = create_member(member_store, "Emma")

    assert member_store.delete(member.id) is True
    assert member_store.by_id(member.id) is None
    assert member_store.delete(member.id) is False


def test_replace_all_keeps_order(member_store):
    create_member(member_store, "Old")
    members = [Member(name="Sarah"), Member(name="Emma")]

    member_store.replace_all(members)

    assert [m.name for m in member_store.all()] == ["Sarah", "Emma"]
    assert len(member_store) == 2


def test_every_mutation_notifies_subscribers(member_store):
    received = []
    member_store.subscribe(received.append, "list-view")

    member = create_member(member_store, "Emma")
    member_store.update(member.model_copy(update={"name": "Em"}))
    member_store.update(Member(name="Ghost"))  # unknown, no event
    member_store.delete(member.id)
    member_store.replace_all([])

    assert [p.event_type for p in received] == [
        StoreEvent.MEMBER_CREATED,
        StoreEvent.MEMBER_UPDATED,
        StoreEvent.MEMBER_DELETED,
        StoreEvent.MEMBERS_RESET,
    ]
    assert received[0].data["member_id"] == member.id


def test_unsubscribe_stops_notifications(member_store):
    received = []
    member_store.subscribe(received.append, "list-view")
    member_store.unsubscribe(received.append, "list-view")

    create_member(member_store, "Emma")

    assert received == []
