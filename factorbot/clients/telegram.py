"""
Telegram Bot API client

Sends replies and registers the webhook, with retry logic and
exponential backoff for transient failures.
"""

import logging
import time
from typing import Any, Callable, Dict, List, Optional

import requests

from ..constants import TELEGRAM_MAX_MESSAGE_LENGTH

logger = logging.getLogger(__name__)


class TelegramAPIError(Exception):
    """Raised when the Bot API answers a request with ok=false."""

    def __init__(self, method: str, description: str, error_code: Optional[int] = None):
        self.method = method
        self.description = description
        self.error_code = error_code
        super().__init__(f"{method} failed ({error_code}): {description}")


def split_message(text: str, limit: int = TELEGRAM_MAX_MESSAGE_LENGTH) -> List[str]:
    """
    Split text into chunks Telegram will accept.

    Breaks on line boundaries where possible; a single line longer than
    limit is cut into limit-sized pieces. Blank lines are kept, so joining
    the chunks with newlines restores the text.
    """
    if len(text) <= limit:
        return [text]

    chunks: List[str] = []
    current: Optional[str] = None
    for line in text.split("\n"):
        while len(line) > limit:
            if current is not None:
                chunks.append(current)
                current = None
            chunks.append(line[:limit])
            line = line[limit:]

        candidate = line if current is None else f"{current}\n{line}"
        if len(candidate) > limit:
            chunks.append(current)
            current = line
        else:
            current = candidate

    if current is not None:
        chunks.append(current)
    return chunks


class TelegramClient:
    """
    Handle Bot API communication with retry logic.

    Handles:
    - HTTP POST requests with retry logic and exponential backoff
    - Bot API response unwrapping ({"ok": ..., "result": ...})
    - Splitting long replies into several messages
    """

    def __init__(
        self,
        token: str,
        api_base: str = "https://api.telegram.org",
        timeout: int = 30,
        retry_attempts: int = 3
    ):
        """
        Initialize Telegram client.

        Args:
            token: Bot API token
            api_base: Bot API base URL
            timeout: Request timeout in seconds
            retry_attempts: Number of attempts for failed requests
        """
        self.base_url = f"{api_base.rstrip('/')}/bot{token}"
        self.timeout = timeout
        self.retry_attempts = retry_attempts
        self.logger = logging.getLogger(f"{__name__}.TelegramClient")

    def _retry_with_exponential_backoff(
        self,
        operation_name: str,
        api_call_func: Callable[[], requests.Response]
    ) -> Optional[requests.Response]:
        """
        Execute an API call with exponential backoff retry logic.

        Client errors (4xx other than 429) are not retried, the request
        would fail the same way again.

        Args:
            operation_name: Name of operation for logging
            api_call_func: Function that makes the API call and returns response

        Returns:
            Response object if successful, None if all retries failed
        """
        for attempt in range(1, self.retry_attempts + 1):
            try:
                response = api_call_func()
                response.raise_for_status()
                self.logger.debug(f"{operation_name} succeeded")
                return response
            except requests.exceptions.HTTPError as e:
                status_code = e.response.status_code if e.response is not None else None
                if status_code is not None and 400 <= status_code < 500 and status_code != 429:
                    self.logger.error(
                        f"{operation_name} rejected ({status_code}): {e.response.text}"
                    )
                    return None
                error = e
            except requests.RequestException as e:
                error = e

            if attempt < self.retry_attempts:
                delay = 2 ** attempt
                self.logger.warning(
                    f"{operation_name} failed (attempt {attempt}/{self.retry_attempts}): {error}. "
                    f"Retrying in {delay}s..."
                )
                time.sleep(delay)
            else:
                self.logger.error(
                    f"{operation_name} failed after {self.retry_attempts} attempts: {error}"
                )
        return None

    def _call(self, method: str, payload: Dict[str, Any]) -> Optional[Any]:
        """
        Invoke a Bot API method.

        Returns:
            The "result" field of the response, or None if the request failed

        Raises:
            TelegramAPIError: If the API answered with ok=false
        """
        url = f"{self.base_url}/{method}"
        response = self._retry_with_exponential_backoff(
            method,
            lambda: requests.post(url, json=payload, timeout=self.timeout)
        )
        if response is None:
            return None

        try:
            data = response.json()
        except ValueError as e:
            self.logger.error(f"{method} returned a non-JSON body: {e}")
            return None
        if not isinstance(data, dict):
            self.logger.error(f"{method} returned unexpected JSON: {data!r}")
            return None

        if not data.get("ok"):
            raise TelegramAPIError(method, data.get("description", "unknown error"), data.get("error_code"))
        return data.get("result")

    def send_message(self, chat_id: int, text: str) -> bool:
        """
        Send text to a chat, split into several messages if it is too long.

        Returns:
            True if every part was delivered
        """
        delivered = True
        for chunk in split_message(text):
            # Telegram rejects empty messages
            if not chunk.strip():
                continue
            result = self._call("sendMessage", {"chat_id": chat_id, "text": chunk})
            if result is None:
                delivered = False
        return delivered

    def set_webhook(self, url: str, secret_token: Optional[str] = None) -> bool:
        """Register url as the bot's webhook."""
        payload: Dict[str, Any] = {"url": url, "allowed_updates": ["message"]}
        if secret_token:
            payload["secret_token"] = secret_token

        result = self._call("setWebhook", payload)
        if result is None:
            return False
        self.logger.info(f"Webhook registered at {url}")
        return True
