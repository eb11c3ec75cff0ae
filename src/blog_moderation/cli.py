"""Command-line screens — home, submit, status check and admin review."""

from __future__ import annotations

import dataclasses
import json
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from blog_moderation.config import load_settings
from blog_moderation.database import SubmissionRepository, init_repository
from blog_moderation.logging import configure_logging
from blog_moderation.models.submission import Submission, SubmissionStatus
from blog_moderation.services import submissions as submissions_svc

app = typer.Typer(help="Blog submission moderation", no_args_is_help=True)
admin_app = typer.Typer(help="Review submissions", no_args_is_help=True)
app.add_typer(admin_app, name="admin")


def _repo(ctx: typer.Context) -> SubmissionRepository:
    return ctx.find_root().obj


def _byline(submission: Submission) -> str:
    when = submission.created_at.strftime("%Y-%m-%d %H:%M")
    return f"{submission.author or 'Anonymous'} · {when}"


def _fail(message: str) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    data_dir: Annotated[Path | None, typer.Option(help="Directory holding the submissions file")] = None,
    log_level: Annotated[str | None, typer.Option(help="Log level (DEBUG, INFO, WARNING, ERROR)")] = None,
    log_file: Annotated[str | None, typer.Option(help="Also write log records to this file")] = None,
) -> None:
    """Build the submission store once and share it with every command."""
    settings = load_settings()
    configure_logging(log_level or settings.app.log_level, log_file=log_file or settings.app.log_file or None)
    storage = settings.storage
    if data_dir is not None:
        storage = dataclasses.replace(storage, data_dir=data_dir)
    ctx.obj = init_repository(storage)


@app.command()
def home(ctx: typer.Context) -> None:
    """List approved posts, newest first."""
    posts = _repo(ctx).list_approved()
    if not posts:
        typer.echo("No approved posts yet.")
        return
    for post in posts:
        typer.echo(post.title)
        typer.echo(_byline(post))
        typer.echo(post.content)
        typer.echo("")


@app.command()
def submit(
    ctx: typer.Context,
    title: Annotated[str, typer.Option(help="Post title")],
    content: Annotated[str, typer.Option(help="Post body")],
    author: Annotated[str | None, typer.Option(help="Author name (optional)")] = None,
) -> None:
    """Submit a blog post for review."""
    outcome = submissions_svc.submit_blog(title, content, author, _repo(ctx))
    if not outcome.ok:
        _fail(outcome.message)
    typer.echo(outcome.message)


@app.command()
def status(
    ctx: typer.Context,
    submission_id: Annotated[str, typer.Argument(help="Reference id returned at submit time")],
) -> None:
    """Check the moderation status of a submission."""
    outcome = submissions_svc.check_status(submission_id, _repo(ctx))
    if outcome.submission is None:
        _fail(outcome.message)
    typer.echo(outcome.message)
    typer.echo(json.dumps(outcome.submission.to_document(), indent=2, ensure_ascii=False))


@admin_app.command("list")
def admin_list(ctx: typer.Context) -> None:
    """List every submission regardless of status."""
    for submission in _repo(ctx).admin_list_all():
        typer.echo(f"[{submission.status}] {submission.id}  {submission.title}")
        typer.echo(f"    {_byline(submission)}")
        if submission.admin_note:
            typer.echo(f"    Note: {submission.admin_note}")


def _moderate(ctx: typer.Context, submission_id: str, new_status: SubmissionStatus, note: str | None) -> None:
    outcome = submissions_svc.moderate(submission_id, new_status, _repo(ctx), admin_note=note)
    if not outcome.ok:
        _fail(outcome.message)
    typer.echo(outcome.message)


@admin_app.command()
def approve(
    ctx: typer.Context,
    submission_id: Annotated[str, typer.Argument(help="Submission id")],
    note: Annotated[str | None, typer.Option(help="Admin note; empty string clears it")] = None,
) -> None:
    """Approve a submission for the public listing."""
    _moderate(ctx, submission_id, SubmissionStatus.APPROVED, note)


@admin_app.command()
def reject(
    ctx: typer.Context,
    submission_id: Annotated[str, typer.Argument(help="Submission id")],
    note: Annotated[str | None, typer.Option(help="Admin note; empty string clears it")] = None,
) -> None:
    """Reject a submission."""
    _moderate(ctx, submission_id, SubmissionStatus.REJECTED, note)


if __name__ == "__main__":
    app()
