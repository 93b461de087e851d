"""Call metadata report."""

from __future__ import annotations

from rich.console import Console

from llm_tools.llm._types import CallMetadata


def format_metadata(metadata: CallMetadata, *, api_method: str, task_name: str) -> str:
    rows = [
        ("Task", task_name),
        ("API method", api_method),
        ("API call time", f"{metadata.api_call_time:.3f}s"),
        ("Model version", metadata.model_version),
        ("Prompt token count", metadata.prompt_token_count),
        ("Candidate token count", metadata.candidates_token_count),
        ("Thoughts token count", metadata.thoughts_token_count),
        ("Total token count", metadata.total_token_count),
    ]
    lines = ["==== Metadata ===="]
    lines.extend(f"✓ {label + ':':<23} {value}" for label, value in rows)
    lines.append("==================")
    return "\n".join(lines)


def print_metadata(
    console: Console, metadata: CallMetadata, *, api_method: str, task_name: str
) -> None:
    console.print(
        format_metadata(metadata, api_method=api_method, task_name=task_name),
        markup=False,
        highlight=False,
    )
