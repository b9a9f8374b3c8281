"""Tests for ProjectStore and the process-wide accessor."""

from __future__ import annotations

import pytest

from projctl.domain.ids import validate_project_id
from projctl.domain.projects import ProjectRecord
from projctl.services.store import ProjectStore, get_store


class TestAddProject:
    def test_appends_one_record(self, store: ProjectStore) -> None:
        store.add_project("A", 2)
        assert len(store) == 1
        record = store.projects[0]
        assert record.completed is False
        assert record.id
        assert validate_project_id(record.id)

    def test_returns_the_new_record(self, store: ProjectStore) -> None:
        record = store.add_project("A", 2, "desc here")
        assert store.projects == [record]
        assert record.description == "desc here"

    def test_distinct_ids(self, store: ProjectStore) -> None:
        first = store.add_project("A", 1)
        second = store.add_project("B", 1)
        assert first.id != second.id

    def test_insertion_order(self, store: ProjectStore) -> None:
        for title in ("one", "two", "three"):
            store.add_project(title, 1)
        assert [p.title for p in store.projects] == ["one", "two", "three"]

    def test_projects_property_is_a_copy(self, store: ProjectStore) -> None:
        store.add_project("A", 1)
        snapshot = store.projects
        snapshot.clear()
        assert len(store) == 1


class TestListeners:
    def test_each_listener_called_once_in_order(self, store: ProjectStore) -> None:
        calls: list[tuple[str, list[ProjectRecord]]] = []
        store.add_listener(lambda projects: calls.append(("first", projects)))
        store.add_listener(lambda projects: calls.append(("second", projects)))

        store.add_project("A", 2)

        assert [name for name, _ in calls] == ["first", "second"]
        first, second = calls[0][1], calls[1][1]
        assert first == second
        assert len(first) == len(second) == 1
        assert first is not second

    def test_snapshot_mutation_is_isolated(self, store: ProjectStore) -> None:
        received: list[list[ProjectRecord]] = []

        def mutating(projects: list[ProjectRecord]) -> None:
            projects.clear()
            projects.append(ProjectRecord(id="intruder1", title="X", people=1))
            received.append(projects)

        store.add_listener(mutating)
        store.add_listener(received.append)

        record = store.add_project("A", 2)

        assert [p.id for p in received[1]] == [record.id]
        assert store.projects == [record]

    def test_snapshot_holds_full_sequence(self, store: ProjectStore) -> None:
        lengths: list[int] = []
        store.add_listener(lambda projects: lengths.append(len(projects)))
        store.add_project("A", 1)
        store.add_project("B", 1)
        assert lengths == [1, 2]

    def test_duplicate_registration_called_twice(self, store: ProjectStore) -> None:
        calls: list[int] = []

        def listener(projects: list[ProjectRecord]) -> None:
            calls.append(len(projects))

        store.add_listener(listener)
        store.add_listener(listener)
        store.add_project("A", 1)
        assert calls == [1, 1]

    def test_listener_sees_record_already_appended(self, store: ProjectStore) -> None:
        seen: list[int] = []
        store.add_listener(lambda _projects: seen.append(len(store)))
        store.add_project("A", 1)
        assert seen == [1]

    def test_raising_listener_propagates_without_corrupting(self, store: ProjectStore) -> None:
        later: list[int] = []

        def boom(_projects: list[ProjectRecord]) -> None:
            raise RuntimeError("listener failed")

        store.add_listener(boom)
        store.add_listener(lambda projects: later.append(len(projects)))

        with pytest.raises(RuntimeError, match="listener failed"):
            store.add_project("A", 1)

        assert len(store) == 1
        assert later == []

    def test_no_listeners(self, store: ProjectStore) -> None:
        store.add_project("A", 1)
        assert len(store) == 1


class TestGetStore:
    def test_same_instance(self) -> None:
        assert get_store() is get_store()

    def test_mutation_visible_through_both_handles(self) -> None:
        first = get_store()
        second = get_store()
        first.add_project("A", 1)
        assert len(second) == 1
        assert second.projects[0].title == "A"

    def test_lazily_created_empty(self) -> None:
        assert len(get_store()) == 0
