"""CLI command for refining a commit from the last session."""

from typing import List, Optional

import typer

from aicc.cache import load_session, replace_session_commit
from aicc.llm import LLMError, get_provider
from aicc.llm.prompts import build_refine_instructions
from aicc.pipeline import refine_candidate
from aicc.cli.utils import (
    confirm,
    llm_error_message,
    model_option,
    provider_option,
    render_candidate,
    require_repo_root,
    resolve_config,
    verbose_option,
    yes_option,
)


def refine_command(
    shorter: bool = typer.Option(False, "--shorter", help="Make the title shorter"),
    longer: bool = typer.Option(False, "--longer", help="Make the title more specific"),
    scope: Optional[str] = typer.Option(None, "--scope", help="Add or change the scope"),
    emoji: bool = typer.Option(False, "--emoji", help="Add a relevant gitmoji"),
    index: int = typer.Option(0, "--index", "-i", min=0, help="0-based index of the commit in the last session"),
    instruction: Optional[List[str]] = typer.Option(
        None,
        "--instruction",
        help="Free-form refinement instruction (repeatable)",
    ),
    model: Optional[str] = model_option(),
    provider: Optional[str] = provider_option(),
    yes: bool = yes_option(),
    verbose: bool = verbose_option(),
) -> None:
    """Refine a commit message from the last generate or split run."""
    repo_root = require_repo_root()
    config = resolve_config(repo_root, model, provider, verbose=verbose)

    session = load_session(repo_root, config.cache_dir)
    if session is None:
        typer.echo("No previous session found. Run 'aicc' or 'aicc split' first.", err=True)
        raise typer.Exit(1)

    if index >= len(session.plan.commits):
        typer.echo(
            f"Commit index {index} out of range (last session has {len(session.plan.commits)} commits).",
            err=True,
        )
        raise typer.Exit(1)

    instructions = build_refine_instructions(shorter, longer, scope, emoji, instruction)
    if not instructions:
        typer.echo("Nothing to refine. Pass --shorter, --longer, --scope, --emoji or --instruction.")
        raise typer.Exit(0)

    typer.echo(f"Refining commit {index} with {config.effective_model}...", err=True)
    try:
        refined = refine_candidate(
            session.plan,
            index,
            instructions,
            config,
            get_provider(config),
            allow_gitmoji=config.allow_gitmoji or emoji,
        )
    except LLMError as e:
        typer.echo(llm_error_message(e), err=True)
        raise typer.Exit(1)

    typer.echo()
    typer.echo(f"Before: {session.plan.commits[index].title}")
    typer.echo("After:")
    render_candidate(refined)

    if not confirm("Use the refined message?", yes):
        typer.echo("Aborted.")
        raise typer.Exit(0)

    replace_session_commit(repo_root, session, index, refined, config.cache_dir)
    typer.echo("Session updated.")
