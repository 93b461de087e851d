"""Tests for the llm-assistant CLI."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from llm_tools.cli import app
from llm_tools.llm._exceptions import APIError, ModelNotFoundError
from llm_tools.llm._types import ModelPage, ModelSummary, StreamFragment, TextPiece, UsageSnapshot
from tests.conftest import FakeProvider

runner = CliRunner()


@pytest.fixture
def settings_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    monkeypatch.setenv("LLM_TOOLS_CONFIG_DIR", str(tmp_path))
    (tmp_path / "settings.json").write_text(
        json.dumps({"apiMethod": "apiKey", "apiKeyConfig": {"apiKeyEnvVarName": "TEST_KEY"}}),
        encoding="utf-8",
    )
    return tmp_path


def _hello_provider() -> FakeProvider:
    return FakeProvider(
        [
            StreamFragment(
                pieces=(TextPiece("Hello."),),
                usage=UsageSnapshot(30, 2, 0, 32),
                model_version="gemini-2.5-flash-001",
            )
        ]
    )


def test_list_tasks() -> None:
    result = runner.invoke(app, ["--list-tasks"])
    assert result.exit_code == 0
    assert "translate" in result.output
    assert "tech-qa" in result.output


@patch("llm_tools.cli.build_provider")
def test_translate_happy_path(mock_build: MagicMock, settings_dir: Path) -> None:
    provider = _hello_provider()
    mock_build.return_value = provider

    result = runner.invoke(app, ["こんにちは"])

    assert result.exit_code == 0, result.output
    assert "Hello.\n" in result.output
    assert "✓ Task:                   translate" in result.output
    assert "✓ Candidate token count:  2" in result.output
    assert "Fake API" in result.output
    request = provider.requests[0]
    assert request.max_tokens == 50
    assert request.input_text == "JAPANESE:\n\nこんにちは\n\n"


@patch("llm_tools.cli.build_provider")
def test_reads_stdin(mock_build: MagicMock, settings_dir: Path) -> None:
    provider = _hello_provider()
    mock_build.return_value = provider

    result = runner.invoke(app, ["--task", "qa", "-"], input="What is TCP?")

    assert result.exit_code == 0, result.output
    assert provider.requests[0].input_text == "QUESTION:\n\nWhat is TCP?\n\n"
    assert provider.requests[0].max_tokens == 512


@patch("llm_tools.cli.build_provider")
def test_unknown_task_makes_no_call(mock_build: MagicMock, settings_dir: Path) -> None:
    result = runner.invoke(app, ["--task", "bogus", "text"])

    assert result.exit_code == 1
    assert "Unknown task: 'bogus'" in result.output
    mock_build.assert_not_called()


@patch("llm_tools.cli.build_provider")
def test_invalid_thinking_level(mock_build: MagicMock, settings_dir: Path) -> None:
    result = runner.invoke(
        app, ["--model", "gemini-3-pro-preview", "--think-level", "medium", "text"]
    )

    assert result.exit_code == 1
    assert "gemini-3-pro-preview" in result.output
    mock_build.assert_not_called()


def test_missing_text(settings_dir: Path) -> None:
    result = runner.invoke(app, [], input="")
    assert result.exit_code == 2
    assert "No input text" in result.output


@patch("llm_tools.cli.build_provider")
def test_model_not_found_lists_models(mock_build: MagicMock, settings_dir: Path) -> None:
    mock_build.return_value = FakeProvider(
        error=ModelNotFoundError(404, "models/nonexistent-model is not found"),
        pages={
            "": ModelPage(
                models=(ModelSummary("models/gemini-2.5-flash", "Fast", ("generateContent",)),)
            )
        },
    )

    result = runner.invoke(app, ["--model", "nonexistent-model", "text"])

    assert result.exit_code == 1
    assert "models/gemini-2.5-flash" in result.output
    assert "'nonexistent-model' was not found" in result.output
    assert "==== Metadata ====" not in result.output


@patch("llm_tools.cli.build_provider")
def test_call_failure(mock_build: MagicMock, settings_dir: Path) -> None:
    mock_build.return_value = FakeProvider(error=APIError(500, "backend exploded"))

    result = runner.invoke(app, ["text"])

    assert result.exit_code == 1
    assert "backend exploded" in result.output


def test_missing_api_key(settings_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TEST_KEY", raising=False)
    result = runner.invoke(app, ["text"])
    assert result.exit_code == 1
    assert "TEST_KEY" in result.output


def test_init_writes_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LLM_TOOLS_CONFIG_DIR", str(tmp_path))

    result = runner.invoke(app, ["--init"], input="1\nMY_KEY\n")

    assert result.exit_code == 0, result.output
    saved = json.loads((tmp_path / "settings.json").read_text(encoding="utf-8"))
    assert saved["apiKeyConfig"]["apiKeyEnvVarName"] == "MY_KEY"
    assert "Settings initialized." in result.output
