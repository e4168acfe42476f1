"""Telegram Bot API models"""
from pydantic import BaseModel


class OutboundMessage(BaseModel):
    """sendMessage request body"""
    chat_id: str
    text: str
    parse_mode: str = "MarkdownV2"
