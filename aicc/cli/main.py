"""Main CLI command: generate a single commit from staged changes."""

from typing import Optional

import typer

from aicc import __version__
from aicc.cache import SessionSnapshot, save_session
from aicc.git import GitError, NoStagedChangesError, create_commit
from aicc.llm import LLMError, get_provider
from aicc.pipeline import (
    collect_staged_changes,
    finalize_candidates,
    make_plugin_context,
    request_plan,
    review_candidate,
)
from aicc.plugins import load_plugins
from aicc.cli.utils import (
    confirm,
    echo_warnings,
    gitmoji_option,
    gitmoji_pure_option,
    llm_error_message,
    model_option,
    privacy_option,
    provider_option,
    render_candidate,
    require_repo_root,
    resolve_config,
    verbose_option,
    yes_option,
)


def run_generate(
    model: Optional[str] = None,
    provider: Optional[str] = None,
    privacy: Optional[str] = None,
    gitmoji: bool = False,
    gitmoji_pure: bool = False,
    yes: bool = False,
    verbose: bool = False,
) -> None:
    """Generate, confirm and create one commit."""
    repo_root = require_repo_root()
    config = resolve_config(repo_root, model, provider, privacy, gitmoji, gitmoji_pure, verbose)

    try:
        changes = collect_staged_changes(repo_root)
    except NoStagedChangesError as e:
        typer.echo(str(e))
        raise typer.Exit(0)
    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Staged files ({len(changes.staged_files)}):", err=True)
    for file_path in changes.staged_files:
        typer.echo(f"  {file_path}", err=True)

    plugins = load_plugins(config.plugins, repo_root)
    ctx = make_plugin_context(repo_root)

    typer.echo(f"Generating commit message with {config.effective_model}...", err=True)
    try:
        plan = request_plan(changes.files, config, get_provider(config), repo_root)
    except LLMError as e:
        typer.echo(llm_error_message(e), err=True)
        raise typer.Exit(1)

    candidates = finalize_candidates(plan.commits, plugins, ctx, config)
    chosen = candidates[0]

    typer.echo()
    render_candidate(chosen)
    echo_warnings(review_candidate(chosen, plugins, ctx))

    if not confirm("Create this commit?", yes):
        typer.echo("Aborted.")
        raise typer.Exit(0)

    try:
        create_commit(chosen.title, chosen.body, cwd=repo_root)
    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    session = SessionSnapshot(
        plan=plan.model_copy(update={"commits": candidates}),
        chosen=[chosen],
        mode="single",
        model=config.effective_model,
    )
    save_session(repo_root, session, config.cache_dir)
    typer.echo("Commit created.")


def generate_command(
    model: Optional[str] = model_option(),
    provider: Optional[str] = provider_option(),
    privacy: Optional[str] = privacy_option(),
    gitmoji: bool = gitmoji_option(),
    gitmoji_pure: bool = gitmoji_pure_option(),
    yes: bool = yes_option(),
    verbose: bool = verbose_option(),
) -> None:
    """Generate a commit message for the staged changes and commit."""
    run_generate(model, provider, privacy, gitmoji, gitmoji_pure, yes, verbose)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"aicc {__version__}")
        raise typer.Exit()


def main_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
    model: Optional[str] = model_option(),
    provider: Optional[str] = provider_option(),
    privacy: Optional[str] = privacy_option(),
    gitmoji: bool = gitmoji_option(),
    gitmoji_pure: bool = gitmoji_pure_option(),
    yes: bool = yes_option(),
    verbose: bool = verbose_option(),
) -> None:
    """Generate an AI-assisted Conventional Commit from staged changes."""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    run_generate(model, provider, privacy, gitmoji, gitmoji_pure, yes, verbose)
