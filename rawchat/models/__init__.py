"""Expose the chat schema types at the package level.

Importing these classes here allows consumers to write concise imports like::

    from rawchat.models import Chat, Color, OpenUrl, ShowText
"""

from .enums import ClickAction, Color, HoverAction  # noqa: F401
from .click_event import (  # noqa: F401
    ChangePage,
    ClickEvent,
    CopyToClipboard,
    OpenFile,
    OpenUrl,
    RunCommand,
    SuggestCommand,
)
from .chat import (  # noqa: F401
    Chat,
    EntityContents,
    HoverEvent,
    ItemContents,
    ShowEntity,
    ShowItem,
    ShowText,
)
from .legacy_chat import LegacyChat  # noqa: F401
