"""Encoding and decoding of chat components.

The :class:`ChatCodec` is the single entry point between JSON text and the
:class:`~rawchat.models.Chat` tree.  Decoding is strict: schema drift such
as unknown keys or unknown event actions is reported as a typed
:class:`~rawchat.utils.error_handler.DecodeError` rather than ignored.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional, Union

from loguru import logger
from pydantic import ValidationError

from ..config.settings import CodecSettings, get_codec_settings
from ..models.chat import Chat
from ..models.legacy_chat import LegacyChat
from ..utils.error_handler import translate_validation_error


class ChatCodec:
    """Convert chat components to and from their JSON text form."""

    def __init__(self, settings: CodecSettings | None = None) -> None:
        self.settings = settings or get_codec_settings()

    def encode(self, chat: Chat, *, indent: Optional[int] = None) -> str:
        """Return the JSON encoding of ``chat``.

        Absent optional fields and an empty ``extra`` list are left out.
        ``indent`` overrides the configured ``json_indent``.
        """
        if indent is None:
            indent = self.settings.json_indent
        return chat.to_json(indent=indent)

    def decode(self, text: Union[str, bytes]) -> Chat:
        """Parse JSON text into a :class:`Chat` tree.

        Raises
        ------
        DecodeError
            One of its subclasses, depending on what was wrong with the
            payload.
        """
        try:
            chat = Chat.from_json(text)
        except ValidationError as exc:
            error = translate_validation_error(exc)
            logger.debug("Rejected chat payload ({}): {}", type(error).__name__, error)
            raise error from exc
        logger.debug("Decoded chat component with {} extra child(ren)", len(chat.extra))
        return chat

    def decode_legacy(self, text: Union[str, bytes]) -> LegacyChat:
        """Parse JSON text using the reduced ``text``/``color`` profile."""
        try:
            return LegacyChat.model_validate_json(text, by_alias=True, by_name=False)
        except ValidationError as exc:
            error = translate_validation_error(exc)
            logger.debug("Rejected legacy chat payload ({}): {}", type(error).__name__, error)
            raise error from exc


@lru_cache()
def get_chat_codec() -> ChatCodec:
    """Return a singleton instance of the ChatCodec."""
    return ChatCodec()


def encode(chat: Chat) -> str:
    """Encode ``chat`` with the shared codec."""
    return get_chat_codec().encode(chat)


def decode(text: Union[str, bytes]) -> Chat:
    """Decode ``text`` with the shared codec."""
    return get_chat_codec().decode(text)
