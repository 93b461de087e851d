"""Tests for the metadata report."""

from llm_tools.assistant._metadata import format_metadata, print_metadata
from llm_tools.llm._types import CallMetadata
from tests.conftest import make_console


def _metadata() -> CallMetadata:
    return CallMetadata(
        api_call_time=1.23456,
        model_version="gemini-2.5-flash-001",
        prompt_token_count=20,
        candidates_token_count=3,
        thoughts_token_count=0,
        total_token_count=23,
    )


def test_format_metadata() -> None:
    report = format_metadata(_metadata(), api_method="Gemini API", task_name="translate")
    lines = report.splitlines()

    assert lines[0] == "==== Metadata ===="
    assert lines[-1] == "=================="
    assert lines[1] == "✓ Task:                   translate"
    assert "✓ API method:             Gemini API" in lines
    assert "✓ API call time:          1.235s" in lines
    assert "✓ Model version:          gemini-2.5-flash-001" in lines
    assert "✓ Candidate token count:  3" in lines
    assert "✓ Total token count:      23" in lines


def test_print_metadata_writes_report() -> None:
    console, buffer = make_console()
    print_metadata(console, _metadata(), api_method="Vertex AI", task_name="tech-qa")
    assert "✓ API method:             Vertex AI" in buffer.getvalue()
