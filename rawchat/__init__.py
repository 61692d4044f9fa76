"""Data model for the raw JSON text ("Chat") message format.

Typical use::

    from rawchat import Chat, Color, decode, encode

    chat = Chat.from_text("Hello, ").add_extra(Chat.from_text("World!").with_bold())
    assert decode(encode(chat)) == chat
"""

from loguru import logger

from .models import (  # noqa: F401
    ChangePage,
    Chat,
    ClickAction,
    ClickEvent,
    Color,
    CopyToClipboard,
    EntityContents,
    HoverAction,
    HoverEvent,
    ItemContents,
    LegacyChat,
    OpenFile,
    OpenUrl,
    RunCommand,
    ShowEntity,
    ShowItem,
    ShowText,
    SuggestCommand,
)
from .services.chat_codec import ChatCodec, decode, encode, get_chat_codec  # noqa: F401
from .utils.error_handler import (  # noqa: F401
    ChatError,
    DecodeError,
    FormattingError,
    InvalidDiscriminatorError,
    MalformedTextError,
    MissingFieldError,
    TypeMismatchError,
    UnknownFieldError,
)

logger.disable("rawchat")
