"""Tests for _http.py helpers."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from llm_tools.llm._exceptions import APIError, ModelNotFoundError
from llm_tools.llm._http import get_json
from tests.conftest import MockResponse


def test_get_json_success(mock_get: MagicMock) -> None:
    mock_get.return_value = MockResponse(json_data={"models": []})
    result = get_json("https://example.com", {"Auth": "key"}, params={"pageSize": 20})

    assert result == {"models": []}
    call_kwargs = mock_get.call_args.kwargs
    assert call_kwargs["params"] == {"pageSize": 20}
    assert call_kwargs["headers"] == {"Auth": "key"}
    assert call_kwargs["timeout"] == 60


def test_get_json_api_error(mock_get: MagicMock) -> None:
    mock_get.return_value = MockResponse(json_data={"error": "bad"}, status_code=400)
    with pytest.raises(APIError) as exc_info:
        get_json("https://example.com", {})
    assert exc_info.value.status_code == 400
    assert exc_info.value.body == {"error": "bad"}
    assert not isinstance(exc_info.value, ModelNotFoundError)


def test_get_json_not_found(mock_get: MagicMock) -> None:
    mock_get.return_value = MockResponse(status_code=404, text="no such thing")
    with pytest.raises(ModelNotFoundError) as exc_info:
        get_json("https://example.com", {})
    assert exc_info.value.body == "no such thing"
