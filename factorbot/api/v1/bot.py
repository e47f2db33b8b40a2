from fastapi import APIRouter, Body, Depends
from pydantic import ValidationError
from typing import Any, Dict, Optional
import logging

from ...clients.telegram import TelegramAPIError, TelegramClient
from ...dependencies import get_telegram_client, verify_webhook_secret
from ...schemas.telegram import Update
from ...services import messages
from ...services.engine import process_message

logger = logging.getLogger(__name__)

router = APIRouter()

ACK = {"ok": True}


def build_reply(text: str) -> str:
    """Reply for a chat message: command help texts, otherwise the factorization report."""
    if text.startswith("/start"):
        return messages.START_MESSAGE
    if text.startswith("/help"):
        return messages.HELP_MESSAGE
    return process_message(text)


@router.post("/bot", dependencies=[Depends(verify_webhook_secret)])
def receive_update(
    payload: Dict[str, Any] = Body(...),
    telegram: Optional[TelegramClient] = Depends(get_telegram_client)
):
    """
    Telegram webhook.

    Always acknowledges with 200 once the secret is verified, Telegram keeps
    redelivering an update until it does. Updates without message text
    (stickers, joins, edits) are ignored.
    """
    try:
        update = Update.model_validate(payload)
    except ValidationError as e:
        logger.warning(f"Ignoring malformed update: {e}")
        return ACK

    message = update.message
    if message is None or message.text is None:
        return ACK

    chat_id = message.chat.id
    text = message.text
    logger.info(f"Received message '{text}' in chat {chat_id}")

    try:
        reply = build_reply(text)

        if telegram is None:
            logger.warning(f"No Telegram client configured, dropping reply to chat {chat_id}")
            return ACK

        if not telegram.send_message(chat_id, reply):
            logger.error(f"Reply to chat {chat_id} was not delivered")
    except TelegramAPIError as e:
        logger.error(f"Telegram rejected reply to chat {chat_id}: {e}")
    except Exception as e:
        logger.exception(f"Unexpected error handling update {update.update_id}: {e}")

    return ACK
