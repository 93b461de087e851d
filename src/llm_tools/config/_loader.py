"""Read and write ``settings.json`` and build the provider it describes.

Everything here runs once at process entry; the resulting values are passed
down explicitly so the request pipeline never touches the environment or disk.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from llm_tools.config._schema import Settings
from llm_tools.llm._providers import create_provider
from llm_tools.llm._providers._base import BaseProvider

SETTINGS_FILENAME = "settings.json"
VERTEX_ACCESS_TOKEN_ENV_VAR = "VERTEX_ACCESS_TOKEN"


class SettingsError(Exception):
    """Raised when the settings file cannot be read or is invalid."""


class _Env(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LLM_TOOLS_", extra="ignore")
    config_dir: Optional[str] = None


def default_settings_path() -> Path:
    """``$LLM_TOOLS_CONFIG_DIR/settings.json``, else ``~/.config/llm-tools/settings.json``."""
    config_dir = _Env().config_dir
    if config_dir and config_dir.strip():
        return Path(config_dir).expanduser() / SETTINGS_FILENAME
    return Path.home() / ".config" / "llm-tools" / SETTINGS_FILENAME


def load_settings(path: Path) -> Settings | None:
    """Return the settings stored at ``path``, or ``None`` if the file does not exist."""
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return Settings.model_validate(data)
    except OSError as exc:
        raise SettingsError(f"Failed to read settings file {path}: {exc}") from exc
    except (json.JSONDecodeError, ValidationError) as exc:
        raise SettingsError(f"Failed to parse settings file {path}: {exc}") from exc


def save_settings(settings: Settings, path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(settings.model_dump(by_alias=True), indent=2) + "\n",
            encoding="utf-8",
        )
    except OSError as exc:
        raise SettingsError(f"Failed to save settings file {path}: {exc}") from exc


def build_provider(
    settings: Settings,
    environ: Mapping[str, str] | None = None,
    *,
    timeout: int = 120,
) -> BaseProvider:
    """Create the provider selected by ``settings``, reading its credential from ``environ``."""
    env = os.environ if environ is None else environ

    if settings.api_method == "apiKey":
        var = settings.api_key_config.api_key_env_var_name
        api_key = env.get(var, "")
        if not api_key:
            raise SettingsError(f"No API key found in environment variable {var!r}.")
        return create_provider(settings.provider_name, api_key=api_key, timeout=timeout)

    access_token = env.get(VERTEX_ACCESS_TOKEN_ENV_VAR, "")
    if not access_token:
        raise SettingsError(
            f"No Vertex AI access token found in environment variable "
            f"{VERTEX_ACCESS_TOKEN_ENV_VAR!r} (try: gcloud auth print-access-token)."
        )
    return create_provider(
        settings.provider_name,
        project=settings.vertex_ai_config.project,
        location=settings.vertex_ai_config.location,
        access_token=access_token,
        timeout=timeout,
    )
