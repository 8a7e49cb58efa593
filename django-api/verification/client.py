"""HTTP client for an OpenAI-compatible chat completions endpoint.

Requests ask for a JSON object matching a schema and return the parsed
object. There is no streaming and no retry.
"""

import json
import logging
from typing import Any

import httpx
from django.conf import settings

from verification.errors import AIServiceError, AIServiceUnavailableError

logger = logging.getLogger(__name__)


class ScreeningClient:
    """Sends a prompt (optionally with one image) and returns structured output."""

    def __init__(
        self,
        base_url: str,
        api_key: str | None,
        model: str,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(cls, transport: httpx.BaseTransport | None = None) -> "ScreeningClient":
        config = settings.TICKETSWIFT_AI
        return cls(
            base_url=config["BASE_URL"],
            api_key=config["API_KEY"],
            model=config["MODEL"],
            timeout=config["TIMEOUT"],
            transport=transport,
        )

    def complete_json(
        self,
        name: str,
        prompt: str,
        schema: dict[str, Any],
        image_data_uri: str | None = None,
    ) -> dict[str, Any]:
        """Run one structured completion.

        Raises:
            AIServiceUnavailableError: If no API key is configured.
            AIServiceError: On transport errors, non-2xx responses or
                unparseable output.
        """
        if not self.api_key:
            raise AIServiceUnavailableError("Screening service is not configured")

        content: list[dict[str, Any]] = [{"type": "text", "text": prompt}]
        if image_data_uri:
            content.append({"type": "image_url", "image_url": {"url": image_data_uri}})

        payload = {
            "model": self.model,
            "messages": [{"role": "user", "content": content}],
            "response_format": {
                "type": "json_schema",
                "json_schema": {"name": name, "schema": schema, "strict": True},
            },
        }

        try:
            with httpx.Client(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                transport=self.transport,
                headers={"Authorization": f"Bearer {self.api_key}"},
            ) as client:
                response = client.post("/chat/completions", json=payload)
                response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning("Screening request %s failed: %s", name, exc)
            raise AIServiceError(f"{name} request failed") from exc

        try:
            message = response.json()["choices"][0]["message"]["content"]
            result = json.loads(message)
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            logger.warning("Screening response for %s was not valid JSON output", name)
            raise AIServiceError(f"{name} returned malformed output") from exc

        if not isinstance(result, dict):
            raise AIServiceError(f"{name} returned malformed output")
        return result
