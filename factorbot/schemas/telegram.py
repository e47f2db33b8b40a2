"""Subset of the Telegram Bot API update objects the webhook reads."""
from pydantic import BaseModel
from typing import Optional


class Chat(BaseModel):
    id: int
    type: Optional[str] = None


class Message(BaseModel):
    message_id: int
    chat: Chat
    date: Optional[int] = None
    text: Optional[str] = None


class Update(BaseModel):
    update_id: int
    message: Optional[Message] = None
