"""Configuration for SyncDash."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """Application configuration."""

    owner: str = ""
    repo: str = ""
    notion_db_id: str = ""
    sample_mode: bool = False
    sample_latency: float = 0.6
    schedule_log_limit: int = 10
