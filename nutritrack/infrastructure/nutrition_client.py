"""Nutrition lookups backed by OpenAI chat completions or a built-in catalogue."""

from __future__ import annotations

import json
import logging
import re
import time
from collections.abc import Callable, Mapping
from typing import Any

from openai import OpenAI, OpenAIError, RateLimitError

from nutritrack.config import Settings
from nutritrack.domain.entities import NutritionFacts

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 3
BACKOFF_BASE_SECONDS = 0.5
SYSTEM_PROMPT = "You are a helpful nutrition assistant that returns a single JSON object."
_JSON_OBJECT_RE = re.compile(r"(?s)\{.*\}")

_PROMPT_TEMPLATE = """Provide detailed nutrition info in JSON format with these fields:
{{
  "food_name": string,
  "calories": float,
  "protein": float,
  "carbs": float,
  "fat": float,
  "serving_qty": float,
  "serving_unit": string,
  "serving_weight_grams": float
}}
Return only the JSON object. For this food description: "{query}"
"""

# Ordered: the first keyword contained in the query wins.
_CATALOGUE: tuple[tuple[str, NutritionFacts], ...] = (
    ("rice", NutritionFacts("Cooked White Rice", 130.0, 2.7, 28.0, 0.3, 1.0, "cup", 158.0)),
    (
        "chicken",
        NutritionFacts("Grilled Chicken Breast", 165.0, 31.0, 0.0, 3.6, 100.0, "grams", 100.0),
    ),
    ("apple", NutritionFacts("Apple", 95.0, 0.5, 25.0, 0.3, 1.0, "medium apple", 182.0)),
    ("banana", NutritionFacts("Banana", 105.0, 1.3, 27.0, 0.4, 1.0, "medium banana", 118.0)),
    ("egg", NutritionFacts("Large Egg", 70.0, 6.0, 0.6, 5.0, 1.0, "large egg", 50.0)),
    ("bread", NutritionFacts("White Bread", 80.0, 2.3, 15.0, 1.0, 1.0, "slice", 28.0)),
)


class NutritionLookupError(RuntimeError):
    """Raised when the nutrition provider does not answer as expected."""


class NutritionRateLimitError(NutritionLookupError):
    """Raised when the provider keeps rate limiting after every retry."""


class NutritionConfigurationError(RuntimeError):
    """Raised when the provider cannot be configured."""


def catalogue_lookup(query: str) -> NutritionFacts:
    """Return the built-in nutrition facts that best match ``query``."""

    normalized = query.strip().lower()
    for keyword, facts in _CATALOGUE:
        if keyword in normalized:
            return NutritionFacts(**vars(facts))
    return NutritionFacts(
        food_name=normalized.title(),
        calories=100.0,
        protein=5.0,
        carbs=15.0,
        fat=3.0,
        serving_qty=1.0,
        serving_unit="serving",
        serving_weight_grams=100.0,
    )


def parse_nutrition_payload(text: str) -> NutritionFacts:
    """Extract the first JSON object from ``text`` and convert it to :class:`NutritionFacts`."""

    match = _JSON_OBJECT_RE.search(text or "")
    if match is None:
        raise NutritionLookupError("Invalid nutrition response: no JSON object found")
    try:
        payload = json.loads(match.group(0).strip())
    except json.JSONDecodeError as exc:
        raise NutritionLookupError("Failed to parse nutrition JSON from the response") from exc
    if not isinstance(payload, Mapping):
        raise NutritionLookupError("Nutrition response is not a JSON object")

    try:
        return NutritionFacts(
            food_name=str(payload.get("food_name") or ""),
            calories=float(payload.get("calories") or 0),
            protein=float(payload.get("protein") or 0),
            carbs=float(payload.get("carbs") or 0),
            fat=float(payload.get("fat") or 0),
            serving_qty=float(payload.get("serving_qty") or 0),
            serving_unit=str(payload.get("serving_unit") or ""),
            serving_weight_grams=float(payload.get("serving_weight_grams") or 0),
        )
    except (TypeError, ValueError) as exc:
        raise NutritionLookupError("Nutrition response contains non-numeric values") from exc


class OpenAINutritionClient:
    """Query an OpenAI chat model for nutrition facts, retrying on rate limits."""

    def __init__(
        self,
        settings: Settings,
        *,
        client: Any | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        api_key = (settings.openai_api_key or "").strip()
        if client is None:
            if not api_key:
                raise NutritionConfigurationError("OPENAI_API_KEY is not configured")
            client_kwargs: dict[str, Any] = {
                "api_key": api_key,
                "timeout": settings.openai_timeout_seconds,
                # Retries are handled here so the backoff stays predictable.
                "max_retries": 0,
            }
            base_url = (settings.openai_base_url or "").strip()
            if base_url:
                client_kwargs["base_url"] = base_url
            client = OpenAI(**client_kwargs)
        self._client = client
        self._model = settings.openai_model
        self._sleep = sleep

    def lookup(self, query: str) -> NutritionFacts:
        logger.debug("Using OpenAI model %s for nutrition lookup", self._model)
        response = None
        for attempt in range(1, MAX_ATTEMPTS + 1):
            try:
                response = self._client.chat.completions.create(
                    model=self._model,
                    messages=[
                        {"role": "system", "content": SYSTEM_PROMPT},
                        {"role": "user", "content": _PROMPT_TEMPLATE.format(query=query)},
                    ],
                    temperature=0.2,
                )
                break
            except RateLimitError as exc:
                if attempt >= MAX_ATTEMPTS:
                    raise NutritionRateLimitError(
                        "OpenAI rate limit or quota exceeded"
                    ) from exc
                backoff = BACKOFF_BASE_SECONDS * (2 ** (attempt - 1))
                logger.warning(
                    "OpenAI rate limit detected, retrying in %.1fs (attempt %s/%s)",
                    backoff,
                    attempt,
                    MAX_ATTEMPTS,
                )
                self._sleep(backoff)
            except OpenAIError as exc:
                logger.error("OpenAI request error: %s", exc)
                raise NutritionLookupError("Nutrition lookup request failed") from exc

        choices = getattr(response, "choices", None) or []
        if not choices:
            raise NutritionLookupError("No response from the nutrition provider")
        text = (choices[0].message.content or "").strip()
        logger.debug("Raw nutrition response: %s", text)
        return parse_nutrition_payload(text)


class NutritionService:
    """Answer nutrition queries with OpenAI when configured, otherwise from the catalogue."""

    def __init__(self, client: OpenAINutritionClient | None = None) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "NutritionService":
        if not (settings.openai_api_key or "").strip():
            logger.warning(
                "OPENAI_API_KEY is not set; nutrition lookups use the built-in catalogue"
            )
            return cls()
        return cls(OpenAINutritionClient(settings))

    @property
    def uses_provider(self) -> bool:
        return self._client is not None

    def lookup(self, query: str) -> NutritionFacts:
        query = (query or "").strip()
        if not query:
            raise ValueError("Query is required")
        if self._client is None:
            return catalogue_lookup(query)
        return self._client.lookup(query)


__all__ = [
    "NutritionConfigurationError",
    "NutritionLookupError",
    "NutritionRateLimitError",
    "NutritionService",
    "OpenAINutritionClient",
    "catalogue_lookup",
    "parse_nutrition_payload",
]
