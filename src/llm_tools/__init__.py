"""llm-tools: stream Gemini answers to the terminal for small everyday tasks."""

from llm_tools.assistant import (
    TaskDefinition,
    TypewriterRenderer,
    build_request_config,
    get_task_definition,
    run_request,
)
from llm_tools.llm import (
    CallMetadata,
    GeminiProvider,
    RequestConfig,
    ThinkingBudget,
    ThinkingLevel,
    VertexAIProvider,
    create_provider,
)

__version__ = "0.1.0"

__all__ = [
    "CallMetadata",
    "GeminiProvider",
    "RequestConfig",
    "TaskDefinition",
    "ThinkingBudget",
    "ThinkingLevel",
    "TypewriterRenderer",
    "VertexAIProvider",
    "__version__",
    "build_request_config",
    "create_provider",
    "get_task_definition",
    "run_request",
]
