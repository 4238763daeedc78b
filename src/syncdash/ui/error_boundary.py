"""Top-level error boundary for view rendering."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from dataclasses import dataclass

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QPushButton, QStackedWidget, QVBoxLayout, QWidget

from syncdash.ui.theme import COLORS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FaultState:
    has_error: bool = False
    message: str = ""

    @classmethod
    def from_exception(cls, exc: BaseException) -> FaultState:
        return cls(has_error=True, message=str(exc) or type(exc).__name__)


class ErrorBoundary(QStackedWidget):
    """Shows its child until a guarded render fails, then a fallback page.

    "Try again" clears the boundary's own fault and runs the reset handler to
    repaint the child. Application state is left as it was.
    """

    def __init__(self, child: QWidget, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._fault = FaultState()
        self._child = child
        self._on_reset: Callable[[], None] | None = None
        self._fallback = self._build_fallback()
        self.addWidget(child)
        self.addWidget(self._fallback)
        self.setCurrentWidget(child)

    @property
    def fault(self) -> FaultState:
        return self._fault

    def guard[**P](self, render: Callable[P, None]) -> Callable[P, None]:
        """Wrap a render callback so a failure trips the boundary."""

        @functools.wraps(render)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> None:
            if self._fault.has_error:
                return
            try:
                render(*args, **kwargs)
            except Exception as exc:
                logger.exception("Rendering failed")
                self._trip(FaultState.from_exception(exc))

        return wrapper

    def set_reset_handler(self, handler: Callable[[], None]) -> None:
        """Register a callback that repaints the child after "Try again"."""
        self._on_reset = handler

    def reset(self) -> None:
        self._fault = FaultState()
        self.setCurrentWidget(self._child)
        # Renders dropped while faulted are replayed from current state.
        if self._on_reset is not None:
            self.guard(self._on_reset)()

    def _trip(self, fault: FaultState) -> None:
        self._fault = fault
        self._message.setText(fault.message)
        self.setCurrentWidget(self._fallback)

    def _build_fallback(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        title = QLabel("Something went wrong")
        title.setStyleSheet("font-size: 18px; font-weight: 600;")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        self._message = QLabel("")
        self._message.setWordWrap(True)
        self._message.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._message.setStyleSheet(f"color: {COLORS['text_muted']};")
        layout.addWidget(self._message)

        retry = QPushButton("Try again")
        retry.clicked.connect(self.reset)
        layout.addWidget(retry, alignment=Qt.AlignmentFlag.AlignCenter)
        return page
