"""Theme, color definitions, QSS stylesheet, and status color helpers."""

from __future__ import annotations

# ── Color palette: dark slate with indigo accents ──

COLORS = {
    "primary": "#6366F1",
    "primary_light": "#A5B4FC",
    "bg": "#020617",
    "panel_bg": "#1E293B",
    "input_bg": "#0F172A",
    "border": "#334155",
    "text": "#E2E8F0",
    "text_strong": "#F1F5F9",
    "text_muted": "#94A3B8",
    "success": "#34D399",
    "warning": "#FACC15",
    "danger": "#F87171",
    "orange": "#FB923C",
    "info": "#60A5FA",
    "cyan": "#22D3EE",
    "purple": "#C084FC",
    "amber": "#FBBF24",
    "neutral": "#94A3B8",
}

# ── Fonts ──

FONT_FAMILY = "-apple-system, 'SF Pro Text', 'Helvetica Neue', 'Segoe UI', Roboto, sans-serif"
MONO_FAMILY = "'SF Mono', Menlo, Consolas, 'Liberation Mono', monospace"

_LEVEL_COLORS = {
    "critical": COLORS["danger"],
    "high": COLORS["orange"],
    "medium": COLORS["warning"],
    "low": COLORS["info"],
}

_TYPE_COLORS = {
    "feature": COLORS["primary_light"],
    "bug": COLORS["danger"],
    "bugfix": COLORS["danger"],
    "task": COLORS["success"],
    "infrastructure": COLORS["purple"],
    "refactor": COLORS["cyan"],
    "docs": COLORS["amber"],
}


def priority_color(priority: str) -> str:
    """Color for a task or focus-area priority."""
    return _LEVEL_COLORS.get((priority or "").lower(), COLORS["neutral"])


def severity_color(severity: str) -> str:
    """Color for a bug severity; same scale as priorities."""
    return _LEVEL_COLORS.get((severity or "").lower(), COLORS["neutral"])


def type_color(task_type: str) -> str:
    return _TYPE_COLORS.get((task_type or "").lower(), COLORS["neutral"])


def score_color(score: float) -> str:
    """Color for a 0-10 quality score."""
    if score >= 8:
        return COLORS["success"]
    if score >= 5:
        return COLORS["warning"]
    return COLORS["danger"]


def health_color(status: str) -> str:
    s = (status or "").lower()
    if s in ("good", "healthy"):
        return COLORS["success"]
    if s in ("warning", "at risk"):
        return COLORS["warning"]
    return COLORS["danger"]


def recommendation_color(recommendation: str) -> str:
    r = (recommendation or "").lower()
    if r == "approve":
        return COLORS["success"]
    if r in ("request_changes", "request changes"):
        return COLORS["danger"]
    return COLORS["warning"]


def practice_status_color(status: str) -> str:
    s = (status or "").lower()
    if s in ("pass", "passed"):
        return COLORS["success"]
    if s == "partial":
        return COLORS["warning"]
    return COLORS["danger"]


def clamp_percent(value: float, scale: float = 100) -> float:
    """Convert ``value`` out of ``scale`` to a percentage clamped to [0, 100]."""
    if scale <= 0:
        return 0.0
    return min(max(value / scale * 100, 0.0), 100.0)


# ── QSS Stylesheet ──


def build_stylesheet() -> str:
    """Build the application-wide QSS stylesheet."""
    c = COLORS
    return f"""
/* ── Global ── */
QWidget {{
    font-family: {FONT_FAMILY};
    font-size: 13px;
    color: {c["text"]};
    background-color: {c["bg"]};
}}

QMainWindow {{
    background-color: {c["bg"]};
}}

/* ── Status bar ── */
QStatusBar {{
    background-color: {c["panel_bg"]};
    border-top: 1px solid {c["border"]};
    font-size: 12px;
    color: {c["text_muted"]};
    padding: 4px 12px;
}}

/* ── Tabs ── */
QTabWidget::pane {{
    border: none;
}}
QTabBar::tab {{
    background: transparent;
    color: {c["text_muted"]};
    padding: 10px 16px;
    border-bottom: 2px solid transparent;
}}
QTabBar::tab:selected {{
    color: {c["primary_light"]};
    border-bottom: 2px solid {c["primary"]};
}}

/* ── Inputs ── */
QLineEdit {{
    background-color: {c["input_bg"]};
    border: 1px solid {c["border"]};
    border-radius: 6px;
    padding: 6px 10px;
}}
QLineEdit:focus {{
    border-color: {c["primary"]};
}}

/* ── Buttons ── */
QPushButton {{
    background-color: {c["primary"]};
    color: white;
    border: none;
    border-radius: 6px;
    padding: 7px 14px;
    font-weight: 500;
}}
QPushButton:disabled {{
    background-color: {c["border"]};
    color: {c["text_muted"]};
}}

/* ── Panels ── */
QFrame#panel {{
    background-color: {c["panel_bg"]};
    border: 1px solid {c["border"]};
    border-radius: 10px;
}}
QTextBrowser {{
    background-color: {c["panel_bg"]};
    border: 1px solid {c["border"]};
    border-radius: 10px;
    padding: 8px;
}}
"""
