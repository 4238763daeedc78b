"""Schedule panel — status, pause/resume, trigger, and execution history."""

from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QTextBrowser,
    QVBoxLayout,
    QWidget,
)

from syncdash.models.schedules import ScheduleState
from syncdash.services.protocols import CronHumanizer
from syncdash.services.schedule_service import describe_schedule
from syncdash.ui.theme import COLORS
from syncdash.ui.widgets.markup_renderer import wrap_html
from syncdash.ui.widgets.report_html import render_schedule


class SchedulePanel(QFrame):
    """Controls for the progress agent's recurring schedule."""

    refresh_requested = Signal()
    toggle_requested = Signal()
    trigger_requested = Signal()

    def __init__(self, humanize: CronHumanizer, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("panel")
        self._humanize = humanize

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 10, 12, 10)

        header = QHBoxLayout()
        title = QLabel("Daily Progress Schedule")
        title.setStyleSheet("font-weight: 600;")
        header.addWidget(title)
        header.addStretch()
        self._refresh_btn = QPushButton("Refresh")
        self._refresh_btn.clicked.connect(self.refresh_requested.emit)
        header.addWidget(self._refresh_btn)
        layout.addLayout(header)

        self._error = QLabel()
        self._error.setStyleSheet(f"color: {COLORS['danger']};")
        self._error.setWordWrap(True)
        layout.addWidget(self._error)

        self._notice = QLabel()
        self._notice.setStyleSheet(f"color: {COLORS['success']};")
        layout.addWidget(self._notice)

        self._details = QTextBrowser()
        self._details.setMinimumHeight(180)
        layout.addWidget(self._details)

        actions = QHBoxLayout()
        self._toggle_btn = QPushButton("Pause Schedule")
        self._toggle_btn.clicked.connect(self.toggle_requested.emit)
        actions.addWidget(self._toggle_btn)
        self._trigger_btn = QPushButton("Run Now")
        self._trigger_btn.clicked.connect(self.trigger_requested.emit)
        actions.addWidget(self._trigger_btn)
        actions.addStretch()
        layout.addLayout(actions)

    def render(self, state: ScheduleState) -> None:
        schedule = state.schedule
        busy = state.loading
        self._refresh_btn.setEnabled(not busy)
        self._refresh_btn.setText("Refreshing..." if busy else "Refresh")

        self._error.setText(state.error or "")
        self._error.setVisible(bool(state.error))
        self._notice.setText(state.action_message or "")
        self._notice.setVisible(bool(state.action_message))

        has_schedule = schedule is not None and bool(schedule.id)
        self._toggle_btn.setVisible(has_schedule)
        self._trigger_btn.setVisible(has_schedule)
        self._toggle_btn.setEnabled(not busy)
        self._trigger_btn.setEnabled(not busy)
        if schedule is not None:
            label = "Pause Schedule" if schedule.is_active else "Activate Schedule"
            self._toggle_btn.setText(label)

        if schedule is None and busy:
            self._details.setHtml(wrap_html('<p class="muted">Loading schedule...</p>'))
            return
        summary = describe_schedule(schedule, self._humanize) if schedule is not None else None
        self._details.setHtml(wrap_html(render_schedule(summary, state.logs)))
