"""
Client for the chat-completion API that answers scholarship queries.

One POST per search, bearer-token auth, bounded timeout, no retries. Upstream
failures are raised as CompletionError subclasses so the route can map each
kind to its own HTTP status.
"""

import logging
from typing import Any, Optional

import httpx

from app.core.config import Settings
from app.core.query_builder import SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class CompletionError(Exception):
    """Completion API call failed or returned something unusable."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class CompletionTimeoutError(CompletionError):
    pass


class CompletionAuthError(CompletionError):
    pass


class CompletionRateLimitError(CompletionError):
    pass


class CompletionBadRequestError(CompletionError):
    pass


_STATUS_ERRORS = {
    400: CompletionBadRequestError,
    401: CompletionAuthError,
    429: CompletionRateLimitError,
}


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class CompletionClient:
    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self._transport = transport

    def _payload(self, query: str) -> dict:
        return {
            "model": self.settings.perplexity_model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": query},
            ],
            "max_tokens": self.settings.max_tokens,
            "temperature": self.settings.temperature,
            "top_p": self.settings.top_p,
            "stream": False,
        }

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.settings.perplexity_api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def complete(self, query: str) -> str:
        """Send the query and return the answer text (choices[0].message.content)."""
        timeout = httpx.Timeout(self.settings.request_timeout_s)
        try:
            async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
                response = await client.post(
                    self.settings.perplexity_api_url,
                    json=self._payload(query),
                    headers=self._headers(),
                )
        except httpx.TimeoutException as e:
            raise CompletionTimeoutError(f"Completion request timed out: {e}") from e
        except httpx.HTTPError as e:
            raise CompletionError(f"Completion request failed: {e}") from e

        logger.info(f"Completion API response status: {response.status_code}")

        if response.status_code != 200:
            body = _response_body(response)
            logger.error(f"Completion API error: {response.status_code} {body}")
            error_cls = _STATUS_ERRORS.get(response.status_code, CompletionError)
            raise error_cls(
                f"Completion API returned status {response.status_code}",
                status_code=response.status_code,
                body=body,
            )

        data = _response_body(response)
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            content = None
        if not content or not isinstance(content, str):
            logger.error(f"Invalid completion response structure: {data}")
            raise CompletionError("Invalid response from AI service", status_code=200, body=data)

        logger.info(f"Completion response length: {len(content)}")
        return content
