"""Tests for DashboardService."""

from boardkit.models import DEFAULT_DASHBOARD
from boardkit.services import BoardService, BoardStore, DashboardService


class TestCreateDashboard:
    """Tests for dashboard creation."""

    def test_create_selects_new_seeded_board(
        self, dashboard_service: DashboardService, store: BoardStore
    ):
        """create_dashboard seeds columns and selects the new board."""
        dashboard_id = dashboard_service.create_dashboard("Work")

        assert dashboard_service.selected == dashboard_id
        assert dashboard_service.get_name(dashboard_id) == "Work"
        board = store.state.boards[dashboard_id]
        assert [c.title for c in board.columns] == ["To do", "In progress", "Done"]
        assert board.tasks == ()

    def test_list_dashboards_in_creation_order(self, dashboard_service: DashboardService):
        """list_dashboards keeps creation order."""
        work = dashboard_service.create_dashboard("Work")
        home = dashboard_service.create_dashboard("Home")

        assert dashboard_service.list_dashboards() == [
            (DEFAULT_DASHBOARD, "Main"),
            (work, "Work"),
            (home, "Home"),
        ]

    def test_dashboards_share_no_data(self, store: BoardStore):
        """Tasks added to one dashboard do not appear on another."""
        dashboards = DashboardService(store)
        boards = BoardService(store)

        boards.add_task("1", {"title": "main task"})
        dashboards.create_dashboard("Other")

        assert boards.board.tasks == ()
        dashboards.select_dashboard(DEFAULT_DASHBOARD)
        assert [t.title for t in boards.board.tasks] == ["main task"]


class TestSelectAndRename:
    """Tests for selection and renaming."""

    def test_select_unknown_id_is_not_validated(
        self, dashboard_service: DashboardService, store: BoardStore
    ):
        """select_dashboard stores unknown ids as given."""
        dashboard_service.select_dashboard("ghost")
        assert store.state.selected == "ghost"
        assert store.current_board is None

    def test_rename(self, dashboard_service: DashboardService):
        """rename_dashboard overwrites the display name."""
        dashboard_service.rename_dashboard(DEFAULT_DASHBOARD, "Home")
        assert dashboard_service.get_name(DEFAULT_DASHBOARD) == "Home"

    def test_rename_unknown_id_upserts_name(
        self, dashboard_service: DashboardService, store: BoardStore
    ):
        """Renaming an unknown id adds a name without a board."""
        dashboard_service.rename_dashboard("ghost", "Ghost")
        assert store.state.names["ghost"] == "Ghost"
        assert "ghost" not in store.state.boards


class TestDeleteDashboard:
    """Tests for dashboard deletion."""

    def test_default_dashboard_is_protected(
        self, dashboard_service: DashboardService, store: BoardStore
    ):
        """The default dashboard cannot be deleted."""
        dashboard_service.create_dashboard("Work")
        before = store.state

        assert dashboard_service.delete_dashboard(DEFAULT_DASHBOARD) is False
        assert store.state is before

    def test_delete_selected_falls_back_to_default(
        self, dashboard_service: DashboardService, store: BoardStore
    ):
        """Deleting the selected dashboard selects the default one."""
        work = dashboard_service.create_dashboard("Work")

        assert dashboard_service.delete_dashboard(work) is True

        assert work not in store.state.boards
        assert work not in store.state.names
        assert dashboard_service.selected == DEFAULT_DASHBOARD

    def test_delete_other_keeps_selection(self, dashboard_service: DashboardService):
        """Deleting another dashboard keeps the selection."""
        work = dashboard_service.create_dashboard("Work")
        home = dashboard_service.create_dashboard("Home")

        dashboard_service.delete_dashboard(work)

        assert dashboard_service.selected == home

    def test_delete_unknown_is_noop(self, dashboard_service: DashboardService, store: BoardStore):
        """Deleting an unknown dashboard leaves the snapshot untouched."""
        before = store.state
        assert dashboard_service.delete_dashboard("ghost") is False
        assert store.state is before
