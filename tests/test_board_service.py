"""Tests for BoardService."""

from boardkit.models import ChecklistItem, TaskDraft, TaskUpdate
from boardkit.repositories import MemoryKeyValueStore, StateStore
from boardkit.services import BoardService, BoardStore, DashboardService


class TestColumns:
    """Tests for column operations."""

    def test_add_column_appends(self, board_service: BoardService):
        """add_column appends after the seeded columns."""
        column = board_service.add_column("Review")

        assert column is not None
        assert column.id == "id1"
        assert [c.title for c in board_service.board.columns] == [
            "To do",
            "In progress",
            "Done",
            "Review",
        ]

    def test_update_column(self, board_service: BoardService):
        """update_column retitles the matching column."""
        assert board_service.update_column("2", "Doing") is True
        assert board_service.get_column("2").title == "Doing"

    def test_update_missing_column_is_noop(self, board_service: BoardService, store: BoardStore):
        """Retitling an unknown column leaves the snapshot untouched."""
        before = store.state
        assert board_service.update_column("missing", "x") is False
        assert store.state is before

    def test_delete_column_cascades_to_tasks(self, board_service: BoardService):
        """delete_column removes every task assigned to the column."""
        board_service.add_task("1", {"title": "a"})
        board_service.add_task("2", {"title": "b"})
        board_service.add_task("1", {"title": "c"})

        assert board_service.delete_column("1") is True

        board = board_service.board
        assert [c.id for c in board.columns] == ["2", "3"]
        assert all(t.column_id != "1" for t in board.tasks)
        assert [t.title for t in board.tasks] == ["b"]

    def test_delete_missing_column_is_noop(self, board_service: BoardService, store: BoardStore):
        """Deleting an unknown column leaves the snapshot untouched."""
        board_service.add_task("1", {"title": "a"})
        before = store.state
        assert board_service.delete_column("missing") is False
        assert store.state is before


class TestAddTask:
    """Tests for task creation."""

    def test_add_task_defaults(self, board_service: BoardService):
        """add_task assigns id, timestamp and empty defaults."""
        task = board_service.add_task("1", TaskDraft(title="Write docs"))

        assert task.id == "id1"
        assert task.column_id == "1"
        assert task.created_at == 1_000
        assert task.checklist == ()
        assert task.media_url == ""
        assert task.date is None
        assert board_service.board.tasks == (task,)

    def test_add_task_from_mapping(self, board_service: BoardService):
        """add_task accepts a plain mapping of draft fields."""
        task = board_service.add_task(
            "1",
            {
                "title": "Plan",
                "labels": ["x"],
                "date": "2026-01-05",
                "media_url": "https://www.youtube.com/embed/abc",
                "checklist": [{"id": "c1", "text": "step"}],
            },
        )
        assert task.labels == ("x",)
        assert task.date == "2026-01-05"
        assert task.media_url == "https://www.youtube.com/embed/abc"
        assert task.checklist == (ChecklistItem(id="c1", text="step"),)

    def test_add_task_appends_in_insertion_order(self, board_service: BoardService):
        """New tasks go to the end of the flat task sequence."""
        board_service.add_task("2", {"title": "first"})
        board_service.add_task("1", {"title": "second"})
        assert [t.title for t in board_service.board.tasks] == ["first", "second"]

    def test_add_task_to_missing_column_keeps_dangling_reference(
        self, board_service: BoardService
    ):
        """A missing column is not rejected or redirected."""
        task = board_service.add_task("nope", {"title": "orphan"})
        assert task is not None
        assert board_service.get_task(task.id).column_id == "nope"


class TestUpdateTask:
    """Tests for task updates."""

    def test_update_task_merges_fields(self, board_service: BoardService):
        """update_task merges only the fields that were set."""
        task = board_service.add_task("1", {"title": "old", "description": "keep"})

        updated = board_service.update_task(task.id, TaskUpdate(title="new"))

        assert updated.title == "new"
        assert updated.description == "keep"
        assert updated.created_at == task.created_at

    def test_update_never_changes_id_or_column(self, board_service: BoardService):
        """id, column_id and created_at in the payload are ignored."""
        task = board_service.add_task("1", {"title": "t"})

        updated = board_service.update_task(
            task.id, {"id": "forged", "column_id": "3", "created_at": 1, "title": "t2"}
        )

        assert updated.id == task.id
        assert updated.column_id == "1"
        assert updated.created_at == task.created_at
        assert updated.title == "t2"

    def test_update_missing_task_is_noop(self, board_service: BoardService, store: BoardStore):
        """Updating an unknown task leaves the snapshot untouched."""
        before = store.state
        assert board_service.update_task("missing", {"title": "x"}) is None
        assert store.state is before

    def test_update_does_not_mutate_previous_snapshot(
        self, board_service: BoardService, store: BoardStore
    ):
        """Earlier snapshots keep their old task values."""
        task = board_service.add_task("1", {"title": "before"})
        snapshot = store.state

        board_service.update_task(task.id, {"title": "after"})

        assert snapshot.current_board.get_task(task.id).title == "before"
        assert store.state.current_board.get_task(task.id).title == "after"


class TestDeleteAndMove:
    """Tests for delete_task and move_task."""

    def test_delete_task(self, board_service: BoardService):
        """delete_task removes the task once and then reports nothing to delete."""
        a = board_service.add_task("1", {"title": "a"})
        b = board_service.add_task("1", {"title": "b"})

        assert board_service.delete_task(a.id) is True
        assert board_service.board.tasks == (b,)
        assert board_service.delete_task(a.id) is False

    def test_move_task_keeps_position(self, board_service: BoardService):
        """move_task changes the column but not the sequence position."""
        a = board_service.add_task("1", {"title": "a"})
        b = board_service.add_task("1", {"title": "b"})
        c = board_service.add_task("1", {"title": "c"})

        assert board_service.move_task(b.id, "3") is True

        tasks = board_service.board.tasks
        assert [t.id for t in tasks] == [a.id, b.id, c.id]
        assert tasks[1].column_id == "3"

    def test_move_task_to_unknown_column_allowed(self, board_service: BoardService):
        """The target column of move_task is not validated."""
        a = board_service.add_task("1", {"title": "a"})
        assert board_service.move_task(a.id, "nowhere") is True
        assert board_service.get_task(a.id).column_id == "nowhere"

    def test_move_missing_task_is_noop(self, board_service: BoardService):
        """Moving an unknown task reports False."""
        assert board_service.move_task("missing", "2") is False


class TestReorderTasks:
    """Tests for reorder_tasks."""

    def test_reorder_moves_active_to_over_position(self, board_service: BoardService):
        """The active task lands at the over task's former index."""
        a = board_service.add_task("1", {"title": "a"})
        b = board_service.add_task("1", {"title": "b"})
        c = board_service.add_task("1", {"title": "c"})

        assert board_service.reorder_tasks(a.id, c.id) is True
        assert [t.id for t in board_service.board.tasks] == [b.id, c.id, a.id]

        assert board_service.reorder_tasks(c.id, b.id) is True
        assert [t.id for t in board_service.board.tasks] == [c.id, b.id, a.id]

    def test_reorder_keeps_other_columns_relative_order(self, board_service: BoardService):
        """Tasks of other columns keep their relative order."""
        a = board_service.add_task("1", {"title": "a"})
        x = board_service.add_task("2", {"title": "x"})
        b = board_service.add_task("1", {"title": "b"})
        y = board_service.add_task("2", {"title": "y"})

        board_service.reorder_tasks(b.id, a.id)

        assert [t.id for t in board_service.board.tasks] == [b.id, a.id, x.id, y.id]
        assert [t.id for t in board_service.tasks_in_column("1")] == [b.id, a.id]
        assert [t.id for t in board_service.tasks_in_column("2")] == [x.id, y.id]

    def test_reorder_across_columns_is_noop(self, board_service: BoardService, store: BoardStore):
        """Tasks in different columns are not reordered."""
        a = board_service.add_task("1", {"title": "a"})
        b = board_service.add_task("2", {"title": "b"})
        before = store.state

        assert board_service.reorder_tasks(a.id, b.id) is False
        assert store.state is before

    def test_reorder_unknown_ids_is_noop(self, board_service: BoardService, store: BoardStore):
        """Unknown ids on either side leave the snapshot untouched."""
        a = board_service.add_task("1", {"title": "a"})
        before = store.state

        assert board_service.reorder_tasks(a.id, "missing") is False
        assert board_service.reorder_tasks("missing", a.id) is False
        assert store.state is before

    def test_reorder_round_trip_restores_pair_order(self, board_service: BoardService):
        """Reordering back and forth restores the pair's order."""
        a = board_service.add_task("1", {"title": "a"})
        board_service.add_task("1", {"title": "m"})
        b = board_service.add_task("1", {"title": "b"})

        def pair_order() -> list[str]:
            return [t.id for t in board_service.board.tasks if t.id in (a.id, b.id)]

        original = pair_order()
        assert board_service.reorder_tasks(a.id, b.id)
        assert pair_order() != original
        assert board_service.reorder_tasks(b.id, a.id)
        assert pair_order() == original

    def test_cross_column_reorder_after_move(self, board_service: BoardService):
        """Moving first makes a cross-column reorder possible."""
        a = board_service.add_task("1", {"title": "a"})
        b = board_service.add_task("2", {"title": "b"})

        board_service.move_task(b.id, "1")

        assert board_service.reorder_tasks(b.id, a.id) is True
        assert [t.id for t in board_service.tasks_in_column("1")] == [b.id, a.id]


class TestUnknownSelection:
    """Board operations with a selection that has no board."""

    def test_mutations_are_ignored(self, store: BoardStore):
        """Without a board for the selection nothing changes."""
        DashboardService(store).select_dashboard("ghost")
        service = BoardService(store)
        before = store.state

        assert service.add_column("x") is None
        assert service.add_task("1", {"title": "x"}) is None
        assert service.delete_column("1") is False
        assert service.board is None
        assert service.tasks_in_column("1") == []
        assert store.state is before


class TestWorkScenario:
    """End-to-end flow on a new dashboard."""

    def test_dashboard_column_task_flow(self):
        """Deleting the only column of a new dashboard empties it."""
        store = BoardStore(StateStore(MemoryKeyValueStore()))
        dashboards = DashboardService(store)
        service = BoardService(store)

        dashboards.create_dashboard("Work")
        todo = service.add_column("Todo")
        service.add_task(todo.id, {"title": "Ship release"})

        assert [t.title for t in service.tasks_in_column(todo.id)] == ["Ship release"]
        service.delete_column(todo.id)
        assert service.board.tasks == ()
