"""LLM transport: streaming Gemini / Vertex AI generateContent clients."""

from llm_tools.llm._exceptions import APIError, ModelNotFoundError
from llm_tools.llm._providers import SUPPORTED_PROVIDERS, create_provider
from llm_tools.llm._providers._base import BaseProvider
from llm_tools.llm._providers._gemini import GeminiProvider
from llm_tools.llm._providers._vertex import VertexAIProvider
from llm_tools.llm._types import (
    CallMetadata,
    ModelPage,
    ModelSummary,
    RequestConfig,
    StreamFragment,
    TextPiece,
    ThinkingBudget,
    ThinkingLevel,
    ThinkingPolicy,
    UsageSnapshot,
)

__all__ = [
    "SUPPORTED_PROVIDERS",
    "APIError",
    "BaseProvider",
    "CallMetadata",
    "GeminiProvider",
    "ModelNotFoundError",
    "ModelPage",
    "ModelSummary",
    "RequestConfig",
    "StreamFragment",
    "TextPiece",
    "ThinkingBudget",
    "ThinkingLevel",
    "ThinkingPolicy",
    "UsageSnapshot",
    "VertexAIProvider",
    "create_provider",
]
