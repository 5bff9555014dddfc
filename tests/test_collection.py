"""Tests for UniqueIdentifierCollection."""

import pytest

from domain_ids import (
    CollectionMissingMember,
    CollectionsOverlap,
    DuplicateIdentifiers,
    IdentifierAlreadyPresent,
    IdentifierKindNotHandled,
    IdentifierNotPresent,
    InvalidIdentifier,
    UniqueIdentifierCollection,
)

from tests.kinds import ProjectId, UserId, _user_ids


def _users(*ids: UserId) -> UniqueIdentifierCollection[UserId]:
    return UniqueIdentifierCollection.from_identifiers(UserId, ids)


@pytest.fixture
def abcd() -> list[UserId]:
    return _user_ids(4)


class TestConstruction:
    def test_from_identifiers(self, abcd: list[UserId]) -> None:
        users = _users(*abcd)
        assert users.count() == 4
        assert len(users) == 4
        assert users.kind is UserId

    def test_other_kind_rejected(self) -> None:
        with pytest.raises(IdentifierKindNotHandled):
            UniqueIdentifierCollection(UserId, [UserId.generate_random(), ProjectId.generate_random()])

    def test_duplicates_rejected(self) -> None:
        a = UserId.generate_random()
        with pytest.raises(DuplicateIdentifiers) as exc_info:
            _users(a, UserId(a.value))
        assert exc_info.value.duplicates == [a.value]

    def test_kind_must_be_identifier_kind(self) -> None:
        with pytest.raises(TypeError):
            UniqueIdentifierCollection(str, [])  # type: ignore[arg-type]

    def test_empty(self) -> None:
        users = UniqueIdentifierCollection.empty(UserId)
        assert users.is_empty()
        assert users.count() == 0

    def test_from_collections_collapses_overlaps(self, abcd: list[UserId]) -> None:
        a, b, c, d = abcd
        merged = UniqueIdentifierCollection.from_collections(
            UserId, [_users(a, b), _users(b, c), _users(c, d)]
        )
        assert merged.count() == 4
        assert merged.is_equal_to(_users(*abcd))

    def test_from_collections_rejects_other_kind(self) -> None:
        projects = UniqueIdentifierCollection(ProjectId, [ProjectId.generate_random()])
        with pytest.raises(IdentifierKindNotHandled):
            UniqueIdentifierCollection.from_collections(UserId, [projects])

    def test_from_strings(self, abcd: list[UserId]) -> None:
        users = UniqueIdentifierCollection.from_strings(UserId, [i.value for i in abcd])
        assert users.values() == [i.value for i in abcd]

    def test_from_strings_rejects_malformed(self) -> None:
        with pytest.raises(InvalidIdentifier):
            UniqueIdentifierCollection.from_strings(UserId, ["nope"])

    def test_from_map(self) -> None:
        records = [{"id": UserId.generate_random().value, "name": name} for name in ("Tom", "Ralf")]
        users = UniqueIdentifierCollection.from_map(
            UserId, records, lambda record: UserId.from_string(record["id"])
        )
        assert users.contains(UserId(records[0]["id"]))
        assert users.contains(UserId(records[1]["id"]))


class TestTransformers:
    def test_add_returns_new_collection(self, abcd: list[UserId]) -> None:
        a, b, c, _ = abcd
        users = _users(a, b)
        added = users.add(c)
        assert added.contains(c)
        assert added.count() == 3
        assert users.not_contains(c)
        assert users.count() == 2

    def test_add_existing_raises_and_keeps_collection(self, abcd: list[UserId]) -> None:
        users = _users(*abcd)
        with pytest.raises(IdentifierAlreadyPresent):
            users.add(UserId(abcd[0].value))
        assert users.count() == 4

    def test_add_other_kind_raises(self) -> None:
        with pytest.raises(IdentifierKindNotHandled):
            _users().add(ProjectId.generate_random())  # type: ignore[arg-type]

    def test_add_if_absent_is_idempotent(self, abcd: list[UserId]) -> None:
        a, b, *_ = abcd
        users = _users(a).add_if_absent(a).add_if_absent(b)
        assert users.is_equal_to(_users(a, b))

    def test_add_all(self, abcd: list[UserId]) -> None:
        a, b, c, d = abcd
        union = _users(a, b).add_all(_users(c, d))
        assert union.is_equal_to(_users(*abcd))

    def test_add_all_with_overlap_raises(self, abcd: list[UserId]) -> None:
        a, b, c, _ = abcd
        with pytest.raises(CollectionsOverlap) as exc_info:
            _users(a, b).add_all(_users(b, c))
        assert exc_info.value.shared == [b]

    def test_add_all_if_absent(self, abcd: list[UserId]) -> None:
        a, b, c, _ = abcd
        union = _users(a, b).add_all_if_absent(_users(b, c))
        assert union.is_equal_to(_users(a, b, c))

    def test_remove(self, abcd: list[UserId]) -> None:
        users = _users(*abcd)
        removed = users.remove(abcd[1])
        assert removed.not_contains(abcd[1])
        assert removed.count() == 3
        assert users.contains(abcd[1])

    def test_remove_missing_raises(self, abcd: list[UserId]) -> None:
        with pytest.raises(IdentifierNotPresent):
            _users(*abcd[:2]).remove(abcd[3])

    def test_remove_if_present(self, abcd: list[UserId]) -> None:
        a, b, c, _ = abcd
        users = _users(a, b).remove_if_present(c).remove_if_present(a)
        assert users.is_equal_to(_users(b))

    def test_remove_all(self, abcd: list[UserId]) -> None:
        a, b, c, d = abcd
        assert _users(*abcd).remove_all(_users(a, c)).is_equal_to(_users(b, d))

    def test_remove_all_with_missing_member_raises(self, abcd: list[UserId]) -> None:
        a, b, c, d = abcd
        with pytest.raises(CollectionMissingMember) as exc_info:
            _users(a, b, c).remove_all(_users(a, d))
        assert exc_info.value.missing == [d]

    def test_remove_all_if_present(self, abcd: list[UserId]) -> None:
        a, b, c, d = abcd
        assert _users(a, b, c).remove_all_if_present(_users(a, d)).is_equal_to(_users(b, c))


class TestSetAlgebra:
    def test_diff_and_intersect_scenario(self, abcd: list[UserId]) -> None:
        a, b, c, d = abcd
        all_users = _users(a, b, c, d)
        some_users = _users(a, c)
        assert all_users.diff(some_users).is_equal_to(_users(b, d))
        assert all_users.intersect(some_users).is_equal_to(_users(a, c))

    def test_diff_is_one_directional(self, abcd: list[UserId]) -> None:
        a, b, c, _ = abcd
        assert _users(a, b).diff(_users(b, c)).is_equal_to(_users(a))

    def test_diff_with_empty(self, abcd: list[UserId]) -> None:
        users = _users(*abcd)
        assert users.diff(_users()).is_equal_to(users)
        assert _users().diff(users).is_empty()

    def test_diff_never_intersects_other(self, abcd: list[UserId]) -> None:
        a, b, c, d = abcd
        left, right = _users(a, b, c), _users(b, d)
        assert left.diff(right).intersect(right).is_empty()

    def test_intersect_follows_receiver_order(self, abcd: list[UserId]) -> None:
        a, b, c, d = abcd
        assert _users(d, c, b, a).intersect(_users(a, b, c)).identifiers() == [c, b, a]

    def test_binary_operation_with_other_kind_raises(self) -> None:
        projects = UniqueIdentifierCollection(ProjectId, [ProjectId.generate_random()])
        with pytest.raises(IdentifierKindNotHandled):
            _users().diff(projects)  # type: ignore[arg-type]


class TestPredicates:
    def test_contains(self, abcd: list[UserId]) -> None:
        a, b, c, _ = abcd
        users = _users(a, b)
        assert users.contains(UserId(a.value))
        assert users.not_contains(c)
        assert a in users
        assert c not in users
        assert "not an identifier" not in users

    def test_in_operator_with_other_kind_is_false(self, abcd: list[UserId]) -> None:
        users = _users(*abcd)
        project = ProjectId.generate_random()
        assert project not in users
        with pytest.raises(IdentifierKindNotHandled):
            users.contains(project)

    def test_contains_every(self, abcd: list[UserId]) -> None:
        a, b, c, d = abcd
        users = _users(a, b, c)
        assert users.contains_every(_users(a, c))
        assert users.contains_every(_users())
        assert users.not_contains_every(_users(a, d))

    def test_contains_some_and_none(self, abcd: list[UserId]) -> None:
        a, b, c, d = abcd
        users = _users(a, b)
        assert users.contains_some(_users(b, c))
        assert not users.contains_some(_users(c, d))
        assert users.contains_none(_users(c, d))
        assert not users.contains_none(_users(a))

    def test_is_empty(self, abcd: list[UserId]) -> None:
        assert _users().is_empty()
        assert _users(abcd[0]).is_not_empty()

    def test_equality_ignores_order(self, abcd: list[UserId]) -> None:
        a, b, c, _ = abcd
        assert _users(a, b, c).is_equal_to(_users(c, a, b))
        assert _users(a, b, c) == _users(c, b, a)
        assert hash(_users(a, b, c)) == hash(_users(c, b, a))

    def test_equality_is_reflexive_and_symmetric(self, abcd: list[UserId]) -> None:
        a, b, c, _ = abcd
        left, right = _users(a, b), _users(b, a)
        assert left.is_equal_to(left)
        assert left.is_equal_to(right) and right.is_equal_to(left)
        assert left.is_not_equal_to(_users(a, c))

    def test_empty_is_not_equal_to_non_empty(self, abcd: list[UserId]) -> None:
        assert _users().is_not_equal_to(_users(abcd[0]))
        assert _users(abcd[0]).is_not_equal_to(_users())


class TestFunctionalHelpers:
    def test_map_returns_plain_list(self, abcd: list[UserId]) -> None:
        assert _users(*abcd).map(str) == [i.value for i in abcd]

    def test_map_with_value_keys(self, abcd: list[UserId]) -> None:
        result = _users(*abcd).map_with_value_keys(lambda i: i.value.upper())
        assert result == {i.value: i.value.upper() for i in abcd}

    def test_filter_returns_same_type(self, abcd: list[UserId]) -> None:
        a, b, c, d = abcd
        kept = _users(*abcd).filter(lambda i: i in (a, c))
        assert type(kept) is UniqueIdentifierCollection
        assert kept.is_equal_to(_users(a, c))

    def test_every_and_some(self, abcd: list[UserId]) -> None:
        users = _users(*abcd)
        assert users.every(lambda i: len(i.value) == 36)
        assert not users.every(lambda i: i == abcd[0])
        assert users.some(lambda i: i == abcd[0])
        assert not _users().some(lambda i: True)
        assert _users().every(lambda i: False)

    def test_reduce(self, abcd: list[UserId]) -> None:
        total = _users(*abcd).reduce(lambda acc, i: acc + len(i.value), 0)
        assert total == 4 * 36

    def test_iteration_and_values(self, abcd: list[UserId]) -> None:
        users = _users(*abcd)
        assert list(users) == abcd
        assert users.values() == [str(i) for i in abcd]
