"""Blocking catalog requests over ``requests``."""

from __future__ import annotations

from typing import Any

import requests

from llm_tools.llm._exceptions import error_for_status


def get_json(
    url: str,
    headers: dict[str, str],
    params: dict[str, Any] | None = None,
    timeout: int = 60,
) -> dict[str, Any]:
    """GET ``url`` and return the decoded body; error statuses raise :class:`APIError`."""
    r = requests.get(url, headers=headers, params=params, timeout=timeout)
    if not r.ok:
        try:
            body: dict[str, Any] | str = r.json()
        except requests.JSONDecodeError:
            body = r.text
        raise error_for_status(r.status_code, body)
    return r.json()
