"""Typer CLI for SyncDash — desktop dashboard plus headless agent runs."""

from __future__ import annotations

import asyncio
import logging
from typing import Annotated

import typer

from syncdash.config import Config
from syncdash.models.operations import OperationPhase, OperationState

app = typer.Typer(
    name="syncdash",
    help="SyncDash — GitHub/Notion project sync, code review and progress dashboard.",
    invoke_without_command=True,
)

OwnerOption = Annotated[str, typer.Option("--owner", help="Repository owner")]
RepoOption = Annotated[str, typer.Option("--repo", help="Repository name")]


@app.callback(invoke_without_command=True)
def serve(
    ctx: typer.Context,
    owner: OwnerOption = "",
    repo: RepoOption = "",
    notion_db: Annotated[str, typer.Option("--notion-db", help="Notion database ID")] = "",
    sample: Annotated[bool, typer.Option("--sample", help="Start in sample data mode")] = False,
) -> None:
    """Start the SyncDash desktop application."""
    if ctx.invoked_subcommand is not None:
        return
    config = Config(owner=owner, repo=repo, notion_db_id=notion_db, sample_mode=sample)
    from syncdash.ui.app import run_app

    run_app(config)


@app.command()
def sync(
    owner: Annotated[str, typer.Argument(help="Repository owner")],
    repo: Annotated[str, typer.Argument(help="Repository name")],
) -> None:
    """Sync GitHub and Notion for a repository and print the project summary."""
    config = Config(owner=owner, repo=repo, sample_latency=0)
    _exit_with(asyncio.run(_do_sync(config)))


@app.command()
def review(
    pr_number: Annotated[str, typer.Argument(help="Pull request number")],
    owner: OwnerOption = "",
    repo: RepoOption = "",
) -> None:
    """Review a pull request and print the structured review."""
    config = Config(owner=owner, repo=repo, sample_latency=0)
    _exit_with(asyncio.run(_do_review(config, pr_number)))


@app.command()
def progress(
    notion_db: Annotated[str, typer.Option("--notion-db", help="Notion database ID")] = "",
    owner: OwnerOption = "",
    repo: RepoOption = "",
) -> None:
    """Check project progress and print overdue items and focus areas."""
    config = Config(owner=owner, repo=repo, notion_db_id=notion_db, sample_latency=0)
    _exit_with(asyncio.run(_do_progress(config)))


async def _do_sync(config: Config) -> OperationState:
    from syncdash.services.container import ServiceContainer

    services = await ServiceContainer.create(config)
    await services.sync.run(config.owner, config.repo)
    return services.sync.state


async def _do_review(config: Config, pr_number: str) -> OperationState:
    from syncdash.services.container import ServiceContainer

    services = await ServiceContainer.create(config)
    await services.review.run(pr_number, config.owner, config.repo)
    return services.review.state


async def _do_progress(config: Config) -> OperationState:
    from syncdash.services.container import ServiceContainer

    services = await ServiceContainer.create(config)
    await services.progress.run(config.notion_db_id, config.owner, config.repo)
    return services.progress.state


def _exit_with(state: OperationState) -> None:
    """Print the operation outcome and map it to an exit code."""
    match state.phase:
        case OperationPhase.LOADED:
            typer.echo(state.result.model_dump_json(indent=2))
        case OperationPhase.FAILED:
            typer.echo(f"Error: {state.error}", err=True)
            raise typer.Exit(1)
        case _:
            typer.echo("Nothing to do: required input is missing.", err=True)
            raise typer.Exit(2)


def main() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    app()
