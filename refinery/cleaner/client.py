"""Chat-completion client that restructures raw markdown.

One POST per document to ``{base_url}/chat/completions``.  No retries and
no backoff: a failure is reported to the caller as :class:`CleanerError`
and the caller decides what to do with the URL.
"""

from __future__ import annotations

from typing import Any

import httpx

from refinery.cleaner.prompts import SYSTEM_PROMPT, build_user_prompt
from refinery.errors import CleanerError

# Sampling parameters are fixed; low temperature keeps output stable.
MAX_TOKENS = 4000
TEMPERATURE = 0.1
TOP_P = 0.9
FREQUENCY_PENALTY = 0.1
PRESENCE_PENALTY = 0.1


def _api_error_detail(response: httpx.Response) -> str:
    """Pull ``error.message`` out of an OpenAI-style error body if present."""
    try:
        body = response.json()
    except ValueError:
        return response.text.strip() or response.reason_phrase
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return response.text.strip() or response.reason_phrase


class MarkdownCleaner:
    """Holds the API configuration used for every cleaning request."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        base_url: str = "https://api.openai.com/v1",
        timeout: float = 120.0,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.endpoint = f"{base_url.rstrip('/')}/chat/completions"
        self.timeout = timeout

    def build_payload(self, markdown: str, source_url: str) -> dict[str, Any]:
        """Return the JSON request body for one cleaning call."""
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_user_prompt(markdown, source_url)},
            ],
            "max_tokens": MAX_TOKENS,
            "temperature": TEMPERATURE,
            "top_p": TOP_P,
            "frequency_penalty": FREQUENCY_PENALTY,
            "presence_penalty": PRESENCE_PENALTY,
        }

    def clean(self, markdown: str, source_url: str) -> str:
        """Send *markdown* for restructuring and return the model's text verbatim.

        Raises:
            CleanerError: On transport errors, non-2xx responses, or a body
                without ``choices[0].message.content``.
        """
        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(
                    self.endpoint,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                    json=self.build_payload(markdown, source_url),
                )
        except httpx.HTTPError as exc:
            raise CleanerError(f"Cleaning request failed: {exc}") from exc

        if response.is_error:
            raise CleanerError(
                f"Cleaning API returned {response.status_code}: "
                f"{_api_error_detail(response)}"
            )

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise CleanerError(f"Malformed cleaning API response: {exc!r}") from exc

        if not isinstance(content, str):
            raise CleanerError("Malformed cleaning API response: content is not text")
        return content
