"""SyncDash — project sync, code review and progress dashboard."""
