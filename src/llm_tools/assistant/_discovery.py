"""Model discovery: list the models that can serve generateContent."""

from __future__ import annotations

import logging

import httpx
import requests
from rich.console import Console

from llm_tools.llm._exceptions import APIError
from llm_tools.llm._providers._base import BaseProvider
from llm_tools.llm._types import ModelSummary

logger = logging.getLogger(__name__)

GENERATE_CONTENT = "generateContent"
PAGE_SIZE = 20


def list_available_models(
    provider: BaseProvider,
    console: Console,
    *,
    page_size: int = PAGE_SIZE,
) -> list[ModelSummary]:
    """Page through the catalog and print every generateContent-capable model.

    Best effort: a listing error is logged and ends the walk, it is never raised.
    Returns the models that were printed.
    """
    console.print(
        f"Available models supporting {GENERATE_CONTENT!r}:",
        markup=False,
        highlight=False,
    )
    found: list[ModelSummary] = []
    page_token = ""
    while True:
        try:
            page = provider.list_models(page_size=page_size, page_token=page_token)
        except (APIError, requests.RequestException, httpx.HTTPError, ValueError) as exc:
            logger.warning("Error listing models: %s", exc)
            break

        for model in page.models:
            if model.supports(GENERATE_CONTENT):
                found.append(model)
                console.print(f"- {model.name}", markup=False, highlight=False)
                if model.description:
                    console.print(
                        f"    {model.description}", markup=False, highlight=False, soft_wrap=True
                    )

        if not page.next_page_token:
            break
        page_token = page.next_page_token
    return found
