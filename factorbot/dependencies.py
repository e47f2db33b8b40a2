import hmac
from typing import Optional

from fastapi import Depends, Header, HTTPException, Request, status
from slowapi import Limiter
from slowapi.util import get_remote_address

from .clients.telegram import TelegramClient
from .config import Settings, get_settings

limiter = Limiter(key_func=get_remote_address)


def get_telegram_client(request: Request) -> Optional[TelegramClient]:
    """The application's Bot API client, or None if no token is configured."""
    return getattr(request.app.state, "telegram", None)


async def verify_webhook_secret(
    x_telegram_bot_api_secret_token: str = Header(None),
    settings: Settings = Depends(get_settings),
):
    """
    Dependency to verify the webhook secret token header.

    Only enforced when WEBHOOK_SECRET is configured; Telegram then sends it
    back in X-Telegram-Bot-Api-Secret-Token with every update.

    Raises:
        HTTPException: 401 if the header is missing or does not match
    """
    if not settings.webhook_secret:
        return True

    if not x_telegram_bot_api_secret_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Webhook secret required. Provide X-Telegram-Bot-Api-Secret-Token header."
        )

    if not hmac.compare_digest(
        x_telegram_bot_api_secret_token.encode(), settings.webhook_secret.encode()
    ):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid webhook secret"
        )

    return True
