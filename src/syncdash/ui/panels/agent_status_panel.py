"""Agent status panel — the roster with the in-flight agent highlighted."""

from __future__ import annotations

from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget

from syncdash.models.agents import AGENTS, AgentId
from syncdash.ui.theme import COLORS


class AgentStatusPanel(QFrame):
    """Lists every agent; the active one is marked as running."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("panel")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 10, 12, 10)
        layout.setSpacing(4)

        header = QLabel("Agent Status")
        header.setStyleSheet("font-weight: 600;")
        layout.addWidget(header)

        self._rows: dict[AgentId, QLabel] = {}
        for agent in AGENTS:
            row = QLabel()
            row.setWordWrap(True)
            layout.addWidget(row)
            self._rows[agent.id] = row
        self.set_active(None)

    def set_active(self, active: AgentId | None) -> None:
        for agent in AGENTS:
            running = agent.id == active
            color = COLORS["primary_light"] if running else COLORS["text_muted"]
            marker = "● running" if running else "○"
            self._rows[agent.id].setText(
                f'<span style="color: {color};">{marker} <b>{agent.name}</b></span>'
                f' <span style="color: {COLORS["text_muted"]};">-- {agent.purpose}</span>'
            )
