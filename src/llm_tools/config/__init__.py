"""Settings file, credentials and first-run setup."""

from llm_tools.config._loader import (
    SETTINGS_FILENAME,
    VERTEX_ACCESS_TOKEN_ENV_VAR,
    SettingsError,
    build_provider,
    default_settings_path,
    load_settings,
    save_settings,
)
from llm_tools.config._schema import APIKeyConfig, Settings, VertexAIConfig
from llm_tools.config._wizard import setup_interactive

__all__ = [
    "SETTINGS_FILENAME",
    "VERTEX_ACCESS_TOKEN_ENV_VAR",
    "APIKeyConfig",
    "Settings",
    "SettingsError",
    "VertexAIConfig",
    "build_provider",
    "default_settings_path",
    "load_settings",
    "save_settings",
    "setup_interactive",
]
