"""Operation views — one tab per agent operation."""

from __future__ import annotations

from collections.abc import Callable
from html import escape
from typing import Any

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QTextBrowser,
    QVBoxLayout,
    QWidget,
)

from syncdash.models.operations import OperationState
from syncdash.ui.theme import COLORS
from syncdash.ui.widgets.markup_renderer import wrap_html
from syncdash.ui.widgets.report_html import (
    render_progress_report,
    render_review_report,
    render_sync_report,
)


class OperationView(QWidget):
    """Input form, run button, error banner and report pane for one operation."""

    run_requested = Signal()

    title = ""
    button_text = ""
    busy_text = ""
    failure_title = ""
    empty_text = ""
    fields: tuple[tuple[str, str, str], ...] = ()  # (key, label, placeholder)

    def __init__(self, render_report: Callable[[Any], str], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._render_report = render_report
        self._inputs: dict[str, QLineEdit] = {}

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 12, 16, 12)
        layout.setSpacing(12)

        form = QFrame()
        form.setObjectName("panel")
        form_layout = QHBoxLayout(form)
        heading = QLabel(self.title)
        heading.setStyleSheet("font-weight: 600; font-size: 14px;")
        form_layout.addWidget(heading)
        for key, label, placeholder in self.fields:
            form_layout.addWidget(QLabel(label))
            edit = QLineEdit()
            edit.setPlaceholderText(placeholder)
            edit.returnPressed.connect(self.run_requested.emit)
            form_layout.addWidget(edit)
            self._inputs[key] = edit
        self._run_btn = QPushButton(self.button_text)
        self._run_btn.clicked.connect(self.run_requested.emit)
        form_layout.addWidget(self._run_btn)
        layout.addWidget(form)

        self._error = QLabel()
        self._error.setWordWrap(True)
        self._error.setStyleSheet(f"color: {COLORS['danger']};")
        self._error.setVisible(False)
        layout.addWidget(self._error)

        self._report = QTextBrowser()
        self._report.setOpenExternalLinks(False)
        layout.addWidget(self._report, stretch=1)

        self.extra_layout = QVBoxLayout()
        layout.addLayout(self.extra_layout)

    def value(self, key: str) -> str:
        return self._inputs[key].text()

    def set_value(self, key: str, value: str) -> None:
        self._inputs[key].setText(value)

    def render(self, state: OperationState[Any], sample: Any | None = None) -> None:
        """Show ``sample`` when given, otherwise the operation's latest state."""
        loading = state.loading
        self._run_btn.setEnabled(not loading)
        self._run_btn.setText(self.busy_text if loading else self.button_text)

        self._error.setVisible(state.error is not None)
        self._error.setText(f"<b>{self.failure_title}</b><br>{escape(state.error or '')}")

        view = sample if sample is not None else state.result
        if view is not None:
            self._report.setHtml(wrap_html(self._render_report(view)))
        elif loading:
            self._report.setHtml(wrap_html('<p class="muted">Working...</p>'))
        elif state.error is None:
            self._report.setHtml(wrap_html(f'<p class="muted">{self.empty_text}</p>'))
        else:
            self._report.clear()


class SyncTab(OperationView):
    title = "Sync Project"
    button_text = "Sync Now"
    busy_text = "Syncing..."
    failure_title = "Sync Failed"
    empty_text = (
        "No sync data yet. Enter a GitHub repository owner and name, then click Sync Now."
    )

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(render_sync_report, parent)


class ReviewTab(OperationView):
    title = "Review Pull Request"
    button_text = "Review PR"
    busy_text = "Reviewing..."
    failure_title = "Review Failed"
    empty_text = "No review yet. Enter a PR number and click Review PR."
    fields = (("pr_number", "PR #", "e.g. 142"),)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(render_review_report, parent)


class ProgressTab(OperationView):
    title = "Check Progress"
    button_text = "Check Progress"
    busy_text = "Checking..."
    failure_title = "Progress Check Failed"
    empty_text = "No progress data yet. Click Check Progress to generate a progress report."
    fields = (("notion_db_id", "Notion Database ID", "e.g. abc123def456"),)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(render_progress_report, parent)
