"""
Tests for beliefs and behaviours: identity, relationship lookups and upserts.
"""

import uuid

import pytest

from beliefsim.behaviour import Behaviour
from beliefsim.belief import Belief, create_belief
from beliefsim.errors import NotFoundError

from doubles import StubBelief


class TestIdentity:
    """Beliefs and behaviours are identified by UUID, not by name."""

    def test_name_only_constructor_generates_distinct_uuids(self):
        b1 = Belief("B1")
        b2 = Belief("B2")

        assert b1.uuid != b2.uuid
        assert b1.name == "B1"
        assert b2.name == "B2"

    def test_name_and_uuid_constructor(self):
        u = uuid.uuid4()
        b = Belief("B1", u)

        assert b.name == "B1"
        assert b.uuid == u

    def test_same_name_is_not_same_belief(self):
        assert Belief("B") != Belief("B")

    def test_same_uuid_is_same_belief_across_types(self):
        u = uuid.uuid4()
        assert Belief("a", u) == StubBelief("b", uuid=u)
        assert hash(Belief("a", u)) == hash(StubBelief("b", uuid=u))

    def test_stub_belief_constructors(self):
        u = uuid.uuid4()
        b1 = StubBelief("B1")
        b2 = StubBelief("B2", uuid=u)

        assert b1.uuid != b2.uuid
        assert b2.uuid == u

    def test_behaviour_identity(self):
        u = uuid.uuid4()
        beh = Behaviour("eat", u)

        assert beh.name == "eat"
        assert beh.uuid == u
        assert beh == Behaviour("renamed", u)
        assert Behaviour("eat") != Behaviour("eat")
        assert len({beh, Behaviour("other", u)}) == 1

    def test_behaviour_explicit_none_uuid_is_generated(self):
        a = Behaviour("a", None)
        b = Behaviour("b", None)

        assert a.uuid is not None
        assert a != b
        assert len({a, b}) == 2


class TestBeliefRelationship:

    def test_set_and_get(self):
        b1 = Belief("b1")
        b2 = StubBelief("b2")

        b1.set_belief_relationship(b2, 5.0)

        assert b1.belief_relationship(b2) == 5.0

    def test_missing_raises_not_found(self):
        b1 = Belief("b1")
        b2 = StubBelief("b2")

        with pytest.raises(NotFoundError):
            b1.belief_relationship(b2)

    def test_not_found_is_a_key_error(self):
        with pytest.raises(KeyError):
            Belief("b1").belief_relationship(Belief("b2"))

    def test_setter_overwrites(self):
        b1 = Belief("b1")
        b2 = StubBelief("b2")

        b1.set_belief_relationship(b2, 5.0)
        assert b1.belief_relationship(b2) == 5.0

        b1.set_belief_relationship(b2, 10.0)
        assert b1.belief_relationship(b2) == 10.0

    def test_relationship_is_directional(self):
        b1 = Belief("b1")
        b2 = Belief("b2")

        b1.set_belief_relationship(b2, 1.0)

        with pytest.raises(NotFoundError):
            b2.belief_relationship(b1)

    def test_self_relationship(self):
        b = Belief("b")
        b.set_belief_relationship(b, 0.5)
        assert b.belief_relationship(b) == 0.5


class TestBehaviourRelationships:

    def test_observed_missing_raises_not_found(self):
        beh = Behaviour("beh")
        b = Belief("b1")

        with pytest.raises(NotFoundError):
            b.observed_behaviour_relationship(beh)

    def test_observed_set_and_update(self):
        beh = Behaviour("beh")
        b = Belief("b1")

        b.set_observed_behaviour_relationship(beh, 5.0)
        assert b.observed_behaviour_relationship(beh) == 5.0

        b.set_observed_behaviour_relationship(beh, 2.0)
        assert b.observed_behaviour_relationship(beh) == 2.0

    def test_performing_missing_raises_not_found(self):
        beh = Behaviour("beh")
        b = Belief("b1")

        with pytest.raises(NotFoundError):
            b.performing_behaviour_relationship(beh)

    def test_performing_set_and_update(self):
        beh = Behaviour("beh")
        b = Belief("b1")

        b.set_performing_behaviour_relationship(beh, 5.0)
        assert b.performing_behaviour_relationship(beh) == 5.0

        b.set_performing_behaviour_relationship(beh, 2.0)
        assert b.performing_behaviour_relationship(beh) == 2.0

    def test_tables_are_independent(self):
        beh = Behaviour("beh")
        b = Belief("b1")

        b.set_observed_behaviour_relationship(beh, 1.0)

        with pytest.raises(NotFoundError):
            b.performing_behaviour_relationship(beh)

    def test_error_names_table_and_key(self):
        beh = Behaviour("beh")

        with pytest.raises(NotFoundError) as excinfo:
            Belief("b1").performing_behaviour_relationship(beh)

        assert excinfo.value.table == "performing_behaviour_relationship"
        assert excinfo.value.key == beh


class TestCreateBelief:

    def test_initial_tables_applied(self):
        other = Belief("other")
        x = Behaviour("x")
        y = Behaviour("y")

        b = create_belief(
            "b",
            beliefs={other: 0.3},
            observed={x: 2.0},
            performing={x: 1.0, y: -1.0},
        )

        assert b.belief_relationship(other) == 0.3
        assert b.observed_behaviour_relationship(x) == 2.0
        assert b.performing_behaviour_relationship(x) == 1.0
        assert b.performing_behaviour_relationship(y) == -1.0

    def test_empty_tables(self):
        b = create_belief("b")

        with pytest.raises(NotFoundError):
            b.observed_behaviour_relationship(Behaviour("x"))
