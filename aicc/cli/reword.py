"""CLI command for rewording an existing commit."""

from typing import List, Optional

import typer

from aicc.compose.models import CommitCandidate, CommitPlan
from aicc.git import (
    GitError,
    MergeInRangeError,
    get_commit_message,
    get_commit_parents,
    reword_commit,
)
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

DEFAULT_REWORD_INSTRUCTION = "Rewrite the message as a compliant Conventional Commit, keeping its meaning."


def reword_command(
    rev: str = typer.Argument(..., help="Commit to reword (hash or revision)"),
    shorter: bool = typer.Option(False, "--shorter", help="Make the title shorter"),
    longer: bool = typer.Option(False, "--longer", help="Make the title more specific"),
    scope: Optional[str] = typer.Option(None, "--scope", help="Add or change the scope"),
    emoji: bool = typer.Option(False, "--emoji", help="Add a relevant gitmoji"),
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
    """Rewrite the message of an existing commit."""
    repo_root = require_repo_root()
    config = resolve_config(repo_root, model, provider, verbose=verbose)

    try:
        if len(get_commit_parents(rev, cwd=repo_root)) > 1:
            typer.echo("Refusing to reword a merge commit.", err=True)
            raise typer.Exit(1)
        message = get_commit_message(rev, cwd=repo_root)
    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    title, _, body = message.partition("\n")
    # Existing titles may be shorter than a generated title is allowed to be
    current = CommitCandidate.model_construct(title=title.strip(), body=body.strip(), score=100)
    plan = CommitPlan.model_construct(commits=[current], meta=None)

    instructions = build_refine_instructions(shorter, longer, scope, emoji, instruction)
    if not instructions:
        instructions = [DEFAULT_REWORD_INSTRUCTION]

    typer.echo(f"Rewording {rev} with {config.effective_model}...", err=True)
    try:
        refined = refine_candidate(
            plan,
            0,
            instructions,
            config,
            get_provider(config),
            allow_gitmoji=config.allow_gitmoji or emoji,
        )
    except LLMError as e:
        typer.echo(llm_error_message(e), err=True)
        raise typer.Exit(1)

    typer.echo()
    typer.echo(f"Before: {current.title}")
    typer.echo("After:")
    render_candidate(refined)

    if not confirm("Rewrite the commit message?", yes):
        typer.echo("Aborted.")
        raise typer.Exit(0)

    try:
        new_hash = reword_commit(rev, refined.title, refined.body, cwd=repo_root)
    except MergeInRangeError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Reworded commit is now {new_hash[:12]}.")
