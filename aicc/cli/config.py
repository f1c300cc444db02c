"""CLI commands for configuration management."""

from pathlib import Path

import typer
import yaml

from aicc import global_config
from aicc.config import (
    API_KEY_ENV_VARS,
    AppConfig,
    ConfigError,
    LLMProvider,
    load_config_detailed,
    normalize_config_keys,
)
from aicc.user_config import find_project_config

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Inspect and edit aicc configuration",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show the resolved configuration and where each value came from."""
    try:
        resolved = load_config_detailed(cwd=Path.cwd())
    except ConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    config = resolved.config
    typer.echo("Resolved aicc configuration:")
    typer.echo()
    for name, value in config.model_dump(mode="json").items():
        if name == "model" and value is None:
            value = f"{config.effective_model} (provider default)"
        typer.echo(f"  {name}: {value}  [{resolved.sources[name]}]")
    typer.echo()


@config_app.command("path")
def config_path() -> None:
    """Show the config files aicc reads."""
    typer.echo(f"Global:  {global_config.get_config_file_path()}")
    project = find_project_config(Path.cwd())
    typer.echo(f"Project: {project if project else '(none found)'}")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Config key (e.g. model, privacy, styleSamples)"),
    value: str = typer.Argument(..., help="Value; parsed as YAML (numbers, true/false, [lists])"),
) -> None:
    """Set a value in the global config file."""
    parsed = yaml.safe_load(value)
    normalized = normalize_config_keys({key: parsed}, "cli")
    if not normalized:
        typer.echo(f"Unknown config key: {key}", err=True)
        typer.echo(f"Valid keys: {', '.join(AppConfig.model_fields)}")
        raise typer.Exit(1)

    try:
        AppConfig.model_validate(normalized)
        written = global_config.save_global_config(normalized)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except ValueError as e:
        typer.echo(f"Invalid value for {key}: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Saved {next(iter(normalized))} to {written}")


@config_app.command("set-key")
def config_set_key(
    provider: str = typer.Argument(
        ...,
        help="Provider name (anthropic, openai, google, openrouter)",
    )
) -> None:
    """Set or update an API key for a provider."""
    try:
        llm_provider = LLMProvider(provider.lower())
    except ValueError:
        typer.echo(f"Invalid provider: {provider}", err=True)
        raise typer.Exit(1)

    env_var = API_KEY_ENV_VARS.get(llm_provider)
    if env_var is None:
        typer.echo(f"Provider {llm_provider.value} does not use an API key.", err=True)
        raise typer.Exit(1)

    typer.echo(f"Setting API key for {llm_provider.value}")
    api_key = typer.prompt(f"Enter your {llm_provider.value} API key", hide_input=True).strip()
    if not api_key:
        typer.echo("No key entered.", err=True)
        raise typer.Exit(1)

    try:
        global_config.save_credential(env_var, api_key)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Saved {env_var} to {global_config.get_credentials_file_path()}")
