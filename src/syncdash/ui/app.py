"""PySide6 application bootstrap — main window, service init, run_app()."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QApplication,
    QCheckBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QStatusBar,
    QTabWidget,
    QVBoxLayout,
    QWidget,
)

from syncdash.models.agents import AGENTS, AgentId, OperationKind
from syncdash.models.operations import OperationState
from syncdash.models.schedules import ScheduleState
from syncdash.services.container import ServiceContainer
from syncdash.services.sample_backend import sample_view
from syncdash.ui.async_bridge import async_slot, cancel_all_tasks, create_event_loop, schedule
from syncdash.ui.error_boundary import ErrorBoundary
from syncdash.ui.panels.agent_status_panel import AgentStatusPanel
from syncdash.ui.panels.schedule_panel import SchedulePanel
from syncdash.ui.theme import build_stylesheet
from syncdash.ui.views.operation_view import OperationView, ProgressTab, ReviewTab, SyncTab

if TYPE_CHECKING:
    from syncdash.config import Config

logger = logging.getLogger(__name__)


class SyncDashMainWindow(QMainWindow):
    """Repository header, three operation tabs and the agent status panel."""

    def __init__(self, config: Config) -> None:
        super().__init__()
        self._config = config
        self._services: ServiceContainer | None = None
        self._sample_mode = config.sample_mode

        self.setWindowTitle("Project Sync Dashboard")
        self.setMinimumSize(1100, 760)

        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setContentsMargins(0, 0, 0, 0)

        # ── Header: shared repository inputs + sample toggle ──
        header = QHBoxLayout()
        header.setContentsMargins(16, 12, 16, 0)
        title = QLabel("Project Sync Dashboard")
        title.setStyleSheet("font-weight: bold; font-size: 16px;")
        header.addWidget(title)
        header.addStretch()
        self._owner = QLineEdit(config.owner)
        self._owner.setPlaceholderText("e.g. acme-corp")
        self._repo = QLineEdit(config.repo)
        self._repo.setPlaceholderText("e.g. web-platform")
        header.addWidget(QLabel("Owner"))
        header.addWidget(self._owner)
        header.addWidget(QLabel("Repository"))
        header.addWidget(self._repo)
        self._sample_toggle = QCheckBox("Sample Data")
        self._sample_toggle.setChecked(self._sample_mode)
        self._sample_toggle.toggled.connect(self._on_sample_toggled)
        header.addWidget(self._sample_toggle)
        layout.addLayout(header)

        # ── Tabs ──
        self._tabs = QTabWidget()
        self._sync_tab = SyncTab()
        self._review_tab = ReviewTab()
        self._progress_tab = ProgressTab()
        self._tabs.addTab(self._sync_tab, "Dashboard")
        self._tabs.addTab(self._review_tab, "Code Review")
        self._tabs.addTab(self._progress_tab, "Progress")
        layout.addWidget(self._tabs, stretch=1)

        self._agent_panel = AgentStatusPanel()
        layout.addWidget(self._agent_panel)

        self._boundary = ErrorBoundary(content)
        self.setCentralWidget(self._boundary)

        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)
        self._status_label = QLabel("Starting...")
        self._status_bar.addWidget(self._status_label)

        self._schedule_panel: SchedulePanel | None = None
        self._views: dict[OperationKind, OperationView] = {
            OperationKind.SYNC: self._sync_tab,
            OperationKind.REVIEW: self._review_tab,
            OperationKind.PROGRESS: self._progress_tab,
        }

        # ── Wire signals ──
        self._sync_tab.run_requested.connect(self._on_sync_requested)
        self._review_tab.run_requested.connect(self._on_review_requested)
        self._progress_tab.run_requested.connect(self._on_progress_requested)
        if config.notion_db_id:
            self._progress_tab.set_value("notion_db_id", config.notion_db_id)

    async def initialize(self) -> None:
        """Build services, attach views, and load the schedule."""
        try:
            logger.info("Starting SyncDash — building service container...")
            self._services = await ServiceContainer.create(self._config)
            services = self._services

            render_state = self._boundary.guard(self._render_operation)
            for kind, operation in self._operations().items():
                operation.subscribe(
                    lambda state, kind=kind: render_state(kind, state)  # type: ignore[misc]
                )
                render_state(kind, operation.state)
            services.coordinator.subscribe(self._boundary.guard(self._on_active_agent))

            self._schedule_panel = SchedulePanel(services.humanize_cron)
            self._schedule_panel.refresh_requested.connect(self._on_schedule_refresh)
            self._schedule_panel.toggle_requested.connect(self._on_schedule_toggle)
            self._schedule_panel.trigger_requested.connect(self._on_schedule_trigger)
            self._progress_tab.extra_layout.addWidget(self._schedule_panel)
            services.schedules.subscribe(self._boundary.guard(self._render_schedule))

            self._boundary.set_reset_handler(self._render_all)

            self._status_label.setText(f"{len(AGENTS)} agents ready")
            await services.schedules.refresh()
        except Exception:
            logger.exception("Application startup failed")
            self._status_label.setText("Startup failed. Check terminal logs.")

    def _operations(self) -> dict[OperationKind, Any]:
        assert self._services is not None
        return {
            OperationKind.SYNC: self._services.sync,
            OperationKind.REVIEW: self._services.review,
            OperationKind.PROGRESS: self._services.progress,
        }

    def _render_operation(self, kind: OperationKind, state: OperationState[Any]) -> None:
        sample = sample_view(kind) if self._sample_mode else None
        self._views[kind].render(state, sample)

    def _render_schedule(self, state: ScheduleState) -> None:
        if self._schedule_panel is not None:
            self._schedule_panel.render(state)

    def _on_active_agent(self, active: AgentId | None) -> None:
        self._agent_panel.set_active(active)
        if active is None:
            self._status_label.setText("Idle")
        else:
            name = next(a.name for a in AGENTS if a.id == active)
            self._status_label.setText(f"{name} running...")

    def _render_all(self) -> None:
        """Repaint every view from the controllers' current state."""
        if self._services is None:
            return
        for kind, operation in self._operations().items():
            self._render_operation(kind, operation.state)
        self._render_schedule(self._services.schedules.state)
        self._on_active_agent(self._services.coordinator.active)

    def _on_sample_toggled(self, checked: bool) -> None:
        self._sample_mode = checked
        self._boundary.guard(self._render_all)()

    @async_slot
    async def _on_sync_requested(self) -> None:
        if self._services is not None:
            await self._services.sync.run(self._owner.text(), self._repo.text())

    @async_slot
    async def _on_review_requested(self) -> None:
        if self._services is not None:
            await self._services.review.run(
                self._review_tab.value("pr_number"), self._owner.text(), self._repo.text()
            )

    @async_slot
    async def _on_progress_requested(self) -> None:
        if self._services is not None:
            await self._services.progress.run(
                self._progress_tab.value("notion_db_id"), self._owner.text(), self._repo.text()
            )

    @async_slot
    async def _on_schedule_refresh(self) -> None:
        if self._services is not None:
            await self._services.schedules.refresh()

    @async_slot
    async def _on_schedule_toggle(self) -> None:
        if self._services is not None:
            await self._services.schedules.toggle()

    @async_slot
    async def _on_schedule_trigger(self) -> None:
        if self._services is not None:
            await self._services.schedules.trigger_now()

    def closeEvent(self, event: QCloseEvent) -> None:
        """Cancel in-flight agent calls and quit."""
        cancel_all_tasks()
        event.accept()
        app = QApplication.instance()
        if app is not None:
            app.quit()


def run_app(config: Config) -> None:
    """Entry point: create QApplication, event loop, main window, and run."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    app = QApplication(sys.argv)
    app.setApplicationName("SyncDash")
    app.setOrganizationName("SyncDash")
    app.setStyleSheet(build_stylesheet())

    loop = create_event_loop(app)

    window = SyncDashMainWindow(config)
    window.show()

    schedule(window.initialize())

    with loop:
        loop.run_forever()
