"""CLI command for splitting staged changes into several commits."""

from typing import Optional

import typer

from aicc.cache import SessionSnapshot, save_session
from aicc.compose import cluster_hunks, execute_split, resolve_file_assignments
from aicc.git import GitError, NoStagedChangesError
from aicc.llm import LLMError, get_provider
from aicc.llm.prompts import MODE_SPLIT
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


def split_command(
    commits: Optional[int] = typer.Option(
        None,
        "--commits",
        "-n",
        min=1,
        help="Requested number of commits (default: let the model choose 2-6)",
    ),
    model: Optional[str] = model_option(),
    provider: Optional[str] = provider_option(),
    privacy: Optional[str] = privacy_option(),
    gitmoji: bool = gitmoji_option(),
    gitmoji_pure: bool = gitmoji_pure_option(),
    yes: bool = yes_option(),
    verbose: bool = verbose_option(),
) -> None:
    """Split the staged changes into several focused commits."""
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

    plugins = load_plugins(config.plugins, repo_root)
    ctx = make_plugin_context(repo_root)
    clusters = cluster_hunks(changes.files)

    typer.echo(
        f"Planning split of {len(changes.staged_files)} files with {config.effective_model}...",
        err=True,
    )
    try:
        plan = request_plan(
            changes.files,
            config,
            get_provider(config),
            repo_root,
            mode=MODE_SPLIT,
            desired_commits=commits,
            clusters=clusters,
        )
    except LLMError as e:
        typer.echo(llm_error_message(e), err=True)
        raise typer.Exit(1)

    candidates = finalize_candidates(plan.commits, plugins, ctx, config)
    assignments = resolve_file_assignments(candidates, changes.staged_files)

    typer.echo()
    for i, (candidate, files) in enumerate(zip(candidates, assignments), 1):
        render_candidate(candidate, label=f"{i}/{len(candidates)}", files=files)
        echo_warnings(review_candidate(candidate, plugins, ctx))

    if not confirm(f"Create {len(candidates)} commits?", yes):
        typer.echo("Aborted.")
        raise typer.Exit(0)

    result = execute_split(candidates, changes.staged_files, repo_root, assignments)

    for candidate, reason in result.skipped:
        typer.echo(f"Skipped '{candidate.title}': {reason}", err=True)
    if result.unassigned:
        typer.echo(f"Left unstaged: {', '.join(result.unassigned)}", err=True)

    session = SessionSnapshot(
        plan=plan.model_copy(update={"commits": candidates}),
        chosen=[candidate for candidate, _, _ in result.created],
        mode="split",
        model=config.effective_model,
    )
    save_session(repo_root, session, config.cache_dir)
    typer.echo(f"Created {result.count} commit(s).")
