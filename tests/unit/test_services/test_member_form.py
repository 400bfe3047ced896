# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for the member form draft controller."""

from datetime import date, datetime, timedelta

import pytest

from roster.models.enums import MemberHealth, MemberSource, MemberType, ProspectStage
from roster.schemas.member import Contact, ContactData, Member, MemberFormData
from roster.services.member_form import (
    CreatingMember,
    InvalidDraftError,
    MemberFormController,
    UpdatingMember,
)


class FakeClock:
    """Clock that moves forward one minute per call."""

    def __init__(self, start: datetime = datetime(2026, 10, 19, 12, 0)) -> None:
        self.current = start

    def __call__(self) -> datetime:
        self.current += timedelta(minutes=1)
        return self.current


@pytest.fixture
def clock():
    return FakeClock()


def create_prospect(store, name: str = "Emma") -> Member:
    member = Member(
        name=name,
        member_type=MemberType.PROSPECT,
        created_at=datetime(2026, 1, 1),
        updated_at=datetime(2026, 1, 1),
        contact=Contact(instagram_handle="emmak"),
        labels={"Doctor"},
    )
    store.create(member)
    return member


class TestCreatingMode:
    def test_draft_defaults(self, member_store, clock):
        form = MemberFormController(CreatingMember(MemberType.PROSPECT), member_store, clock)

        assert form.is_creating is True
        assert form.draft.name == ""
        assert form.draft.member_type == MemberType.PROSPECT
        assert form.draft.source == MemberSource.HINGE
        assert form.draft.stage == ProspectStage.MATCHED
        assert form.draft.health == MemberHealth.ACTIVE
        assert form.draft.labels == set()
        assert form.draft.contact.phone_number is None
        assert form.title == "New Prospect"

    def test_roster_member_title(self, member_store):
        form = MemberFormController(CreatingMember(MemberType.ROSTER_MEMBER), member_store)
        assert form.title == "New Roster Member"

    def test_commit_creates_member(self, member_store, clock):
        form = MemberFormController(CreatingMember(MemberType.PROSPECT), member_store, clock)
        form.draft.name = "Emma"
        form.draft.labels = {"Doctor"}

        member = form.commit()

        assert member_store.by_id(member.id) == member
        assert member.name == "Emma"
        assert member.created_at == member.updated_at == clock.current
        assert [m.id for m in member_store.prospects()] == [member.id]

    def test_commits_get_fresh_ids(self, member_store):
        ids = set()
        for name in ("Emma", "Olivia"):
            form = MemberFormController(CreatingMember(MemberType.PROSPECT), member_store)
            form.draft.name = name
            ids.add(form.commit().id)
        assert len(ids) == 2

    def test_upgrade_is_noop_while_creating(self, member_store):
        form = MemberFormController(CreatingMember(MemberType.PROSPECT), member_store)

        assert form.upgrade() is False
        assert form.draft.member_type == MemberType.PROSPECT
        assert form.draft.upgraded_date is None


class TestValidation:
    @pytest.mark.parametrize(
        "name,valid",
        [("Emma", True), (" Emma ", True), ("", False), ("   ", False), ("\n\t", False)],
    )
    def test_validate_name(self, member_store, name, valid):
        form = MemberFormController(CreatingMember(MemberType.PROSPECT), member_store)
        form.draft.name = name
        assert form.validate() is valid

    def test_commit_refuses_blank_name(self, member_store):
        form = MemberFormController(CreatingMember(MemberType.PROSPECT), member_store)
        form.draft.name = "   "

        with pytest.raises(InvalidDraftError):
            form.commit()
        assert member_store.all() == []


class TestContactAccessors:
    def test_read_missing_value_as_empty_string(self, member_store):
        form = MemberFormController(CreatingMember(MemberType.PROSPECT), member_store)
        assert form.address == ""
        assert form.tiktok_handle == ""

    def test_write_round_trip(self, member_store):
        form = MemberFormController(CreatingMember(MemberType.PROSPECT), member_store)

        form.phone_number = "555-0123"
        assert form.phone_number == "555-0123"
        assert form.draft.contact.phone_number == "555-0123"

        form.phone_number = ""
        assert form.draft.contact.phone_number is None
        assert form.phone_number == ""

    @pytest.mark.parametrize(
        "field", ["address", "phone_number", "instagram_handle", "snapchat_handle", "tiktok_handle"]
    )
    def test_every_accessor_normalizes_empty_string(self, member_store, field):
        form = MemberFormController(CreatingMember(MemberType.PROSPECT), member_store)
        setattr(form, field, "value")
        setattr(form, field, "")
        assert getattr(form.draft.contact, field) is None


class TestUpdatingMode:
    def test_draft_copies_existing_member(self, member_store):
        member = create_prospect(member_store)
        form = MemberFormController(UpdatingMember(member), member_store)

        assert form.is_creating is False
        assert form.title == "Updating Profile"
        assert form.draft.name == "Emma"
        assert form.draft.labels == {"Doctor"}
        assert form.instagram_handle == "emmak"

    def test_draft_edits_do_not_touch_store_before_commit(self, member_store):
        member = create_prospect(member_store)
        form = MemberFormController(UpdatingMember(member), member_store)

        form.draft.name = "Emma K"
        form.draft.labels.add("Runner")

        assert member_store.by_id(member.id).name == "Emma"
        assert member.labels == {"Doctor"}

    def test_commit_updates_member(self, member_store, clock):
        member = create_prospect(member_store)
        create_prospect(member_store, "Olivia")
        form = MemberFormController(UpdatingMember(member), member_store, clock)

        form.draft.name = "Emma K"
        form.draft.birthday = date(1998, 5, 1)
        form.draft.stage = ProspectStage.SCHEDULED
        form.snapchat_handle = "emma_k"
        before_commit = clock.current
        updated = form.commit()

        stored = member_store.by_id(member.id)
        assert stored == updated
        assert stored.id == member.id
        assert stored.created_at == member.created_at
        assert stored.updated_at > before_commit
        assert stored.name == "Emma K"
        assert stored.birthday == date(1998, 5, 1)
        assert stored.stage == ProspectStage.SCHEDULED
        assert stored.contact.id == member.contact.id
        assert stored.contact.snapchat_handle == "emma_k"
        assert stored.contact.updated_at == stored.updated_at
        # Position is preserved
        assert [m.name for m in member_store.all()] == ["Olivia", "Emma K"]

    def test_commit_for_deleted_member_does_not_recreate_it(self, member_store):
        member = create_prospect(member_store)
        form = MemberFormController(UpdatingMember(member), member_store)
        member_store.delete(member.id)

        form.commit()

        assert member_store.all() == []


class TestUpgrade:
    def test_upgrade_prospect(self, member_store, clock):
        member = create_prospect(member_store)
        form = MemberFormController(UpdatingMember(member), member_store, clock)

        assert form.upgrade() is True
        upgraded_at = form.draft.upgraded_date

        assert form.draft.member_type == MemberType.ROSTER_MEMBER
        assert upgraded_at == clock.current

        # Second call is a no-op
        assert form.upgrade() is False
        assert form.draft.upgraded_date == upgraded_at

    def test_upgrade_roster_member_is_noop(self, member_store):
        member = Member(name="Sarah", member_type=MemberType.ROSTER_MEMBER)
        member_store.create(member)
        form = MemberFormController(UpdatingMember(member), member_store)

        assert form.upgrade() is False
        assert form.draft.upgraded_date is None

    def test_upgrade_scenario_moves_member_to_roster(self, member_store):
        """Create Emma as a prospect, upgrade her, and find her on the roster."""
        creating = MemberFormController(CreatingMember(MemberType.PROSPECT), member_store)
        creating.draft.name = "Emma"
        emma = creating.commit()

        assert [m.id for m in member_store.prospects()] == [emma.id]
        assert member_store.roster() == []

        updating = MemberFormController(UpdatingMember(emma), member_store)
        updating.upgrade()
        updating.commit()

        roster = member_store.roster()
        assert [m.id for m in roster] == [emma.id]
        assert roster[0].upgraded_date is not None
        assert member_store.prospects() == []


class TestApply:
    def test_apply_copies_only_set_fields(self, member_store):
        member = create_prospect(member_store)
        form = MemberFormController(UpdatingMember(member), member_store)

        form.apply(MemberFormData(notes="Loves hiking", stage=ProspectStage.TALKING))

        assert form.draft.name == "Emma"
        assert form.draft.notes == "Loves hiking"
        assert form.draft.stage == ProspectStage.TALKING

    def test_apply_ignores_member_type(self, member_store):
        member = create_prospect(member_store)
        form = MemberFormController(UpdatingMember(member), member_store)

        form.apply(MemberFormData(member_type=MemberType.ROSTER_MEMBER))

        assert form.draft.member_type == MemberType.PROSPECT

    def test_apply_skips_null_required_fields(self, member_store):
        member = create_prospect(member_store)
        form = MemberFormController(UpdatingMember(member), member_store)

        form.apply(MemberFormData(name=None, birthday=None))

        assert form.draft.name == "Emma"
        assert form.draft.birthday is None

    def test_apply_contact_fields(self, member_store):
        member = create_prospect(member_store)
        form = MemberFormController(UpdatingMember(member), member_store)

        form.apply(MemberFormData(contact=ContactData(instagram_handle="", address="Paris")))

        assert form.draft.contact.instagram_handle is None
        assert form.address == "Paris"
