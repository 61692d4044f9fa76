"""Reduced chat profile carrying only ``text`` and ``color``."""

from __future__ import annotations

from typing import Optional

from pydantic import ConfigDict, StrictStr

from .base import WireModel
from .chat import Chat
from .enums import Color


class LegacyChat(WireModel):
    """Minimal text component used by older payloads.

    Unlike :class:`Chat` this profile is permissive: any key other than
    ``text`` and ``color`` is ignored while decoding.
    """

    model_config = ConfigDict(extra="ignore")

    text: StrictStr
    color: Optional[Color] = None

    def upgrade(self) -> Chat:
        """Return the equivalent full :class:`Chat` component."""
        return Chat(text=self.text, color=self.color)
