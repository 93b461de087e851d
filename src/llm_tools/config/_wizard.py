"""Interactive first-run setup."""

from __future__ import annotations

from pathlib import Path

import typer

from llm_tools.config._loader import SettingsError, save_settings
from llm_tools.config._schema import (
    DEFAULT_API_KEY_ENV_VAR,
    DEFAULT_VERTEX_LOCATION,
    APIKeyConfig,
    Settings,
    VertexAIConfig,
)


def setup_interactive(path: Path) -> Settings:
    """Ask which API to use, save the answers to ``path`` and return them."""
    typer.echo()
    typer.echo("Select the API method to use:")
    typer.echo("1. API key (Gemini API)")
    typer.echo("2. Vertex AI")
    choice = typer.prompt("Choose (1 or 2)").strip()

    if choice == "1":
        env_var = typer.prompt(
            "Environment variable that holds the API key",
            default=DEFAULT_API_KEY_ENV_VAR,
        ).strip()
        settings = Settings(
            api_method="apiKey",
            api_key_config=APIKeyConfig(api_key_env_var_name=env_var or DEFAULT_API_KEY_ENV_VAR),
        )
    elif choice == "2":
        project = typer.prompt("Google Cloud project ID", default="", show_default=False).strip()
        if not project:
            raise SettingsError("A project ID is required for Vertex AI.")
        location = typer.prompt("Vertex AI region", default=DEFAULT_VERTEX_LOCATION).strip()
        settings = Settings(
            api_method="vertexAI",
            vertex_ai_config=VertexAIConfig(
                project=project, location=location or DEFAULT_VERTEX_LOCATION
            ),
        )
    else:
        raise SettingsError(f"Invalid choice: {choice!r}")

    save_settings(settings, path)
    typer.echo()
    typer.echo(f"Settings saved to {path}.")
    typer.echo(f"API method: {settings.api_method}")
    typer.echo()
    return settings
