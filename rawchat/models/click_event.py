"""Click events that can be attached to a chat component.

Each variant wraps a single string payload and is encoded as
``{"action": <discriminator>, "value": <payload>}``.  The discriminator is
the snake_case variant name, see :class:`~rawchat.models.enums.ClickAction`.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import Field, StrictStr

from .base import WireModel


class OpenUrl(WireModel):
    """Open ``value`` in the player's web browser."""

    action: Literal["open_url"] = "open_url"
    value: StrictStr


class OpenFile(WireModel):
    """Open the local file at ``value``."""

    action: Literal["open_file"] = "open_file"
    value: StrictStr


class RunCommand(WireModel):
    """Run ``value`` as if the player had typed it."""

    action: Literal["run_command"] = "run_command"
    value: StrictStr


class SuggestCommand(WireModel):
    """Put ``value`` into the player's chat input."""

    action: Literal["suggest_command"] = "suggest_command"
    value: StrictStr


class ChangePage(WireModel):
    """Turn a book to the page given in ``value``."""

    action: Literal["change_page"] = "change_page"
    value: StrictStr


class CopyToClipboard(WireModel):
    """Copy ``value`` to the clipboard."""

    action: Literal["copy_to_clipboard"] = "copy_to_clipboard"
    value: StrictStr


ClickEvent = Annotated[
    Union[OpenUrl, OpenFile, RunCommand, SuggestCommand, ChangePage, CopyToClipboard],
    Field(discriminator="action"),
]
