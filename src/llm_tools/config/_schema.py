"""Settings schema: which API to call and how to authenticate."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_API_KEY_ENV_VAR = "API_KEY_GOOGLE"
DEFAULT_VERTEX_LOCATION = "asia-northeast1"


class VertexAIConfig(BaseModel):
    """Google Cloud project and region used for Vertex AI."""

    model_config = ConfigDict(populate_by_name=True)

    project: str = ""
    location: str = DEFAULT_VERTEX_LOCATION


class APIKeyConfig(BaseModel):
    """Name of the environment variable that holds the Gemini API key."""

    model_config = ConfigDict(populate_by_name=True)

    api_key_env_var_name: str = Field(DEFAULT_API_KEY_ENV_VAR, alias="apiKeyEnvVarName")


class Settings(BaseModel):
    """Contents of ``settings.json``."""

    model_config = ConfigDict(populate_by_name=True)

    api_method: Literal["apiKey", "vertexAI"] = Field(..., alias="apiMethod")
    vertex_ai_config: VertexAIConfig = Field(default_factory=VertexAIConfig, alias="vertexAiConfig")
    api_key_config: APIKeyConfig = Field(default_factory=APIKeyConfig, alias="apiKeyConfig")

    @model_validator(mode="after")
    def _check_backend_fields(self) -> Settings:
        if self.api_method == "vertexAI" and not self.vertex_ai_config.project:
            raise ValueError("apiMethod 'vertexAI' requires vertexAiConfig.project to be set.")
        if self.api_method == "apiKey" and not self.api_key_config.api_key_env_var_name:
            raise ValueError("apiMethod 'apiKey' requires apiKeyConfig.apiKeyEnvVarName to be set.")
        return self

    @property
    def provider_name(self) -> str:
        return "vertex-ai" if self.api_method == "vertexAI" else "gemini"
