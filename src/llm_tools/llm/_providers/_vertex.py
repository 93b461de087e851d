"""Vertex AI provider: same wire format as Gemini, different endpoints and auth."""

from __future__ import annotations

import httpx

from llm_tools.llm._providers._gemini import GeminiProvider


class VertexAIProvider(GeminiProvider):
    """Gemini models served through Vertex AI (OAuth bearer token)."""

    api_method = "Vertex AI"
    _models_key = "publisherModels"

    def __init__(
        self,
        project: str,
        location: str,
        access_token: str,
        *,
        timeout: int = 120,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__("", timeout=timeout, transport=transport)
        self._project = project
        self._location = location
        self._headers = {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
            "x-goog-user-project": project,
        }

    @property
    def _host(self) -> str:
        return f"https://{self._location}-aiplatform.googleapis.com"

    def _stream_url(self, model: str) -> str:
        model = model.removeprefix("models/")
        return (
            f"{self._host}/v1/projects/{self._project}/locations/{self._location}"
            f"/publishers/google/models/{model}:streamGenerateContent?alt=sse"
        )

    def _models_url(self) -> str:
        return f"{self._host}/v1beta1/publishers/google/models"
