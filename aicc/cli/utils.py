"""Shared helpers for the aicc CLI commands."""

from pathlib import Path
from typing import Optional

import typer

from aicc.compose.models import CommitCandidate
from aicc.config import AppConfig, ConfigError, StyleMode, load_config
from aicc.git import GitError, get_repo_root
from aicc.llm import (
    LLMError,
    MissingAPIKeyError,
    ParseError,
    ProviderInvocationError,
    ProviderTimeoutError,
)
from aicc.log import enable_verbose


def model_option():
    return typer.Option(None, "--model", "-m", help="Model to use (e.g. github-copilot/gpt-4.1)")


def provider_option():
    return typer.Option(
        None,
        "--provider",
        help="Model provider (opencode, anthropic, openai, google, openrouter, mock)",
    )


def privacy_option():
    return typer.Option(None, "--privacy", help="Diff privacy level sent to the model (low, medium, high)")


def gitmoji_option():
    return typer.Option(False, "--gitmoji", help="Render titles as '<emoji> type(scope): subject'")


def gitmoji_pure_option():
    return typer.Option(False, "--gitmoji-pure", help="Render titles as '<emoji>: subject'")


def yes_option():
    return typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt")


def verbose_option():
    return typer.Option(False, "--verbose", "-v", help="Print debug logs to stderr")


def require_repo_root() -> Path:
    """Get the repository root or exit with an error."""
    try:
        return get_repo_root()
    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def resolve_config(
    repo_root: Path,
    model: Optional[str] = None,
    provider: Optional[str] = None,
    privacy: Optional[str] = None,
    gitmoji: bool = False,
    gitmoji_pure: bool = False,
    verbose: bool = False,
) -> AppConfig:
    """Resolve configuration with CLI flags as overrides, or exit.

    Args:
        repo_root: Directory to start the project config search from.
        model: --model flag.
        provider: --provider flag.
        privacy: --privacy flag.
        gitmoji: --gitmoji flag.
        gitmoji_pure: --gitmoji-pure flag (wins over --gitmoji).
        verbose: --verbose flag.

    Returns:
        The resolved AppConfig.
    """
    overrides = {"model": model, "provider": provider, "privacy": privacy}
    if gitmoji_pure:
        overrides["style"] = StyleMode.GITMOJI_PURE.value
    elif gitmoji:
        overrides["style"] = StyleMode.GITMOJI.value
    if verbose:
        overrides["verbose"] = True

    try:
        config = load_config(cwd=repo_root, overrides=overrides)
    except ConfigError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(1)

    if config.verbose:
        enable_verbose()
    return config


def llm_error_message(error: LLMError) -> str:
    """User-facing message for a provider or response failure."""
    if isinstance(error, ProviderTimeoutError):
        return f"Model timed out: {error}"
    if isinstance(error, ProviderInvocationError):
        return f"Model invocation failed: {error}"
    if isinstance(error, MissingAPIKeyError):
        return f"Error: {error}"
    if isinstance(error, ParseError):
        return f"Failed to parse model response ({error.reason}): {error}"
    return f"Error: {error}"


def render_candidate(candidate: CommitCandidate, label: Optional[str] = None, files: Optional[list[str]] = None) -> None:
    """Print a candidate the way it will be committed."""
    if label:
        typer.echo(f"[{label}] (score {candidate.score:g})")
    typer.echo(candidate.title)
    if candidate.body:
        typer.echo()
        typer.echo(candidate.body)
    if files:
        typer.echo()
        typer.echo("  Files:")
        for file_path in files:
            typer.echo(f"    - {file_path}")
    typer.echo()


def echo_warnings(warnings: list[str]) -> None:
    for warning in warnings:
        typer.echo(f"Warning: {warning}", err=True)


def confirm(message: str, assume_yes: bool = False) -> bool:
    """Ask for confirmation unless --yes was given."""
    if assume_yes:
        return True
    return typer.confirm(message, default=True)
