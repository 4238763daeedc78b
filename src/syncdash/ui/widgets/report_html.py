"""HTML report builders for the three result panes and the schedule card."""

from __future__ import annotations

from html import escape

from syncdash.models.schedules import ExecutionLogEntry, ScheduleSummary
from syncdash.models.views import CodeReviewView, ProgressView, SyncView, TaskItem
from syncdash.ui.theme import (
    COLORS,
    clamp_percent,
    health_color,
    practice_status_color,
    priority_color,
    recommendation_color,
    score_color,
    severity_color,
    type_color,
)
from syncdash.ui.widgets.markup_renderer import render_markup


def _badge(text: str, color: str) -> str:
    return f'<span class="badge" style="color: {color};">{escape(text)}</span>'


def _section(title: str, body: str, color: str = "") -> str:
    style = f' style="color: {color};"' if color else ""
    return f"<h3{style}>{escape(title)}</h3>{body}"


def _table(headers: list[str], rows: list[list[str]], empty: str) -> str:
    if not rows:
        return f'<p class="muted">{escape(empty)}</p>'
    head = "".join(f"<th>{escape(h)}</th>" for h in headers)
    body = "".join("<tr>" + "".join(f"<td>{cell}</td>" for cell in row) + "</tr>" for row in rows)
    return f"<table><tr>{head}</tr>{body}</table>"


# ── Project sync ──


def _task_rows(tasks: list[TaskItem]) -> list[list[str]]:
    return [
        [
            escape(t.title),
            _badge(t.type, type_color(t.type)),
            _badge(t.priority, priority_color(t.priority)),
            escape(t.assignee),
            escape(t.source),
        ]
        for t in tasks
    ]


def render_sync_report(view: SyncView) -> str:
    summary = view.project_summary
    board = view.task_list
    report = view.sync_report
    contributors = view.active_contributors

    parts = [
        f"<h2>{escape(summary.project_name)}</h2>",
        f'<p class="muted">Last synced: {escape(summary.last_synced)}</p>',
        "<p>Health: "
        + _badge(summary.health_status, health_color(summary.health_status))
        + f" &nbsp; Completion: <strong>{summary.completion_percentage}%</strong>"
        + f" &nbsp; Total Tasks: <strong>{summary.total_tasks}</strong></p>",
        _section("Highlights", render_markup(summary.highlights), COLORS["success"]),
        _section("Blockers", render_markup(summary.blockers), COLORS["danger"]),
    ]
    headers = ["Task", "Type", "Priority", "Assignee", "Source"]
    for title, tasks in (
        ("To Do", board.todo),
        ("In Progress", board.in_progress),
        ("Done", board.done),
    ):
        parts.append(
            _section(f"{title} ({len(tasks)})", _table(headers, _task_rows(tasks), "No tasks"))
        )

    def _status(value: str, connected: bool) -> str:
        return _badge(value, COLORS["success"] if connected else COLORS["danger"])

    parts.append(
        _section(
            "Sync Report",
            f"<p>GitHub: {_status(report.github_status, report.github_connected)}"
            f" &nbsp; Notion: {_status(report.notion_status, report.notion_connected)}"
            f" &nbsp; Items Synced: <strong>{report.items_synced}</strong>"
            f' &nbsp; <span class="muted">{escape(report.sync_timestamp)}</span></p>',
        )
    )
    contributor_rows = [
        [escape(c.name), str(c.contributions), f"{contributors.share(c):.0f}%"]
        for c in contributors.contributors
    ]
    parts.append(
        _section(
            "Active Contributors",
            _table(["Name", "Contributions", "Share"], contributor_rows, "No contributor data"),
        )
    )
    return "".join(parts)


# ── Code review ──


def render_review_report(view: CodeReviewView) -> str:
    metrics = view.quality_metrics
    parts = [
        f'<h2 style="color: {score_color(view.overall_score)};">'
        f"{view.overall_score}/10</h2>",
        "<p>"
        + _badge(view.recommendation_label, recommendation_color(view.recommendation))
        + f" &nbsp; PR #{view.pr_number or ''}"
        + f' &nbsp; <span class="muted">{escape(view.repository)}</span></p>',
        render_markup(view.summary),
    ]
    metric_rows = [
        [name, f'<span style="color: {score_color(value)};">{value}/10</span>',
         f"{clamp_percent(value, 10):.0f}%"]
        for name, value in (
            ("Readability", metrics.readability),
            ("Maintainability", metrics.maintainability),
            ("Performance", metrics.performance),
            ("Security", metrics.security),
        )
    ]
    parts.append(_section("Quality Metrics", _table(["Metric", "Score", "Bar"], metric_rows, "")))
    bug_rows = [
        [
            _badge(b.severity, severity_color(b.severity)),
            escape(b.description),
            f"<code>{escape(b.file)}</code>",
            escape(b.suggestion),
        ]
        for b in view.bugs_found
    ]
    parts.append(
        _section(
            f"Bugs Found ({len(view.bugs_found)})",
            _table(["Severity", "Description", "File", "Suggestion"], bug_rows, "No bugs found"),
            COLORS["danger"],
        )
    )
    improvement_rows = [
        [escape(i.category), escape(i.description), _badge(i.priority, priority_color(i.priority))]
        for i in view.improvements
    ]
    parts.append(
        _section(
            "Improvements",
            _table(["Category", "Description", "Priority"], improvement_rows, "No suggestions"),
        )
    )
    practice_rows = [
        [escape(p.practice), _badge(p.status, practice_status_color(p.status)), escape(p.note)]
        for p in view.best_practices
    ]
    parts.append(
        _section(
            "Best Practices",
            _table(["Practice", "Status", "Note"], practice_rows, "No best practice checks"),
        )
    )
    return "".join(parts)


# ── Progress ──


def render_progress_report(view: ProgressView) -> str:
    summary = view.progress_summary
    parts: list[str] = []
    if view.report_date:
        posted = ""
        if view.reminder_posted:
            posted = " &nbsp; " + _badge("Reminder Posted", COLORS["success"])
        parts.append(f'<p class="muted">Report Date: {escape(view.report_date)}{posted}</p>')
    parts.append(
        "<p>"
        f'Completed <strong style="color: {COLORS["success"]};">{summary.tasks_completed}</strong>'
        f' &nbsp; In Progress <strong>{summary.tasks_in_progress}</strong>'
        f' &nbsp; Overdue <strong style="color: {COLORS["danger"]};">'
        f"{summary.tasks_overdue}</strong>"
        f' &nbsp; Upcoming <strong style="color: {COLORS["warning"]};">'
        f"{summary.upcoming_deadlines}</strong>"
        f' &nbsp; Completion <strong style="color: {COLORS["cyan"]};">'
        f"{summary.completion_rate}%</strong></p>"
    )
    if view.message:
        parts.append(render_markup(view.message))
    overdue_rows = [
        [
            escape(i.title),
            escape(i.due_date),
            f'<span style="color: {COLORS["danger"]};">{i.days_overdue} days</span>',
            escape(i.assignee),
        ]
        for i in view.overdue_items
    ]
    parts.append(
        _section(
            f"Overdue Items ({len(view.overdue_items)})",
            _table(
                ["Task", "Due Date", "Days Overdue", "Assignee"], overdue_rows, "No overdue items"
            ),
            COLORS["danger"],
        )
    )
    upcoming_rows = [
        [
            escape(t.title),
            escape(t.due_date),
            f'<span style="color: {COLORS["warning"] if t.is_urgent else COLORS["info"]};">'
            f"{t.days_remaining} days</span>",
            escape(t.assignee),
        ]
        for t in view.upcoming_tasks
    ]
    parts.append(
        _section(
            f"Upcoming Tasks ({len(view.upcoming_tasks)})",
            _table(
                ["Task", "Due Date", "Days Left", "Assignee"], upcoming_rows, "No upcoming tasks"
            ),
            COLORS["info"],
        )
    )
    focus_rows = [
        [escape(f.area), _badge(f.priority, priority_color(f.priority)), escape(f.reason)]
        for f in view.focus_areas
    ]
    parts.append(
        _section(
            "Focus Areas",
            _table(["Area", "Priority", "Reason"], focus_rows, "No focus areas"),
        )
    )
    return "".join(parts)


# ── Schedule ──


def render_schedule(summary: ScheduleSummary | None, logs: list[ExecutionLogEntry]) -> str:
    if summary is None:
        return '<p class="muted">No schedule found for the progress reminder agent.</p>'
    status_color = COLORS["success"] if summary.status == "Active" else COLORS["neutral"]
    details = _table(
        ["Status", "Schedule", "Timezone", "Next Run", "Last Run"],
        [[
            _badge(summary.status, status_color),
            escape(summary.cadence),
            escape(summary.timezone),
            escape(summary.next_run),
            escape(summary.last_run),
        ]],
        "",
    )
    log_rows = [
        [
            escape(entry.executed_at or "N/A"),
            _badge(entry.status_label, COLORS["success"] if entry.success else COLORS["danger"]),
            entry.attempts_label,
        ]
        for entry in logs
    ]
    history = _table(["Executed At", "Status", "Attempts"], log_rows, "No executions yet")
    return details + _section("Execution History", history)
