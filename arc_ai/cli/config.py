"""CLI commands for global configuration management."""

import typer

from arc_ai import global_config
from arc_ai.config import PROVIDER_ORDER
from arc_ai.llm import PROVIDER_CLASSES

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global arc-ai configuration in ~/.arc-ai/",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show current configuration and which AI CLIs are installed."""
    try:
        config = global_config.load_global_config()
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"arc-ai configuration ({global_config.get_config_file_path()}):")
    typer.echo()
    typer.echo(f"  Model: {config.get('model') or 'provider default'}")
    typer.echo()
    typer.echo("Providers (in order of preference):")

    selected = None
    for provider in PROVIDER_ORDER:
        provider_cls = PROVIDER_CLASSES[provider]
        available = provider_cls.is_available()
        marker = " "
        if available and selected is None:
            selected = provider
            marker = "*"
        status = "installed" if available else "not found"
        typer.echo(f"  {marker} {provider.value}: {status}")

    if selected is None:
        typer.echo()
        typer.echo("No AI provider available. Install the claude or codex CLI.")


@config_app.command("set-model")
def config_set_model(
    model: str = typer.Argument(..., help="Model name passed to the AI CLI via --model"),
) -> None:
    """Set the default model used when --model is not given."""
    model = model.strip()
    if not model:
        typer.echo("Error: model name cannot be empty", err=True)
        raise typer.Exit(1)

    try:
        global_config.set_default_model(model)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Default model set to: {model}")


@config_app.command("unset-model")
def config_unset_model() -> None:
    """Remove the default model so each CLI uses its own default."""
    try:
        removed = global_config.clear_default_model()
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if removed:
        typer.echo("✓ Default model removed")
    else:
        typer.echo("No default model configured.")
