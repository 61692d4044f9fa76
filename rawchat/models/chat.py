"""The chat component tree and the hover events that nest it.

A :class:`Chat` is a node of styled text: its own ``text`` followed by the
``extra`` children, each of which inherits the parent's formatting unless
it overrides it.  Hover events live in this module because ``show_text``
and ``show_entity`` carry nested components.
"""

from __future__ import annotations

from typing import Annotated, Any, Iterable, List, Literal, Optional, Union
from uuid import UUID

from pydantic import Field, StrictBool, StrictInt, StrictStr, ValidationInfo, model_validator
from pydantic_core import PydanticCustomError, PydanticSerializationError

from ..utils.error_handler import FormattingError
from .base import WireModel
from .click_event import ClickEvent
from .enums import Color

WIRE_CONTEXT_KEY = "rawchat_wire"


class ShowText(WireModel):
    """Show another chat component as a tooltip."""

    action: Literal["show_text"] = "show_text"
    contents: Chat


class ItemContents(WireModel):
    """Item reference shown by :class:`ShowItem`."""

    id: StrictStr
    count: Optional[Annotated[StrictInt, Field(ge=-(2**31), le=2**31 - 1)]] = None
    tag: Optional[StrictStr] = None


class ShowItem(WireModel):
    """Show the tooltip of an item."""

    action: Literal["show_item"] = "show_item"
    contents: ItemContents


class EntityContents(WireModel):
    """Entity reference shown by :class:`ShowEntity`.

    ``entity_type`` is written as ``type`` on the wire and ``id`` uses the
    hyphenated UUID form.
    """

    name: Optional[Chat] = None
    entity_type: StrictStr = Field(..., alias="type")
    id: UUID


class ShowEntity(WireModel):
    """Show the name, type and UUID of an entity."""

    action: Literal["show_entity"] = "show_entity"
    contents: EntityContents


HoverEvent = Annotated[
    Union[ShowText, ShowItem, ShowEntity],
    Field(discriminator="action"),
]


class Chat(WireModel):
    """A text component of the raw JSON text format.

    Style flags are tri-state: ``None`` inherits the parent's formatting,
    ``True``/``False`` override it.  Instances are usually built through
    the chaining mutators::

        Chat(text="Hello, ").add_extra(Chat(text="World!").with_bold()).with_color(Color.GOLD)

    ``str(chat)`` yields the compact JSON encoding.
    """

    text: StrictStr = Field("", description="The plain text of this component.")
    extra: List[Chat] = Field(
        default_factory=list,
        description="Components rendered after ``text``, in order.",
    )
    color: Optional[Color] = None
    bold: Optional[StrictBool] = None
    italic: Optional[StrictBool] = None
    underlined: Optional[StrictBool] = None
    strikethrough: Optional[StrictBool] = None
    obfuscated: Optional[StrictBool] = None
    click_event: Optional[ClickEvent] = None
    hover_event: Optional[HoverEvent] = None

    @model_validator(mode="before")
    @classmethod
    def _require_text_on_wire(cls, data: Any, info: ValidationInfo) -> Any:
        # ``text`` is optional when building in Python but required in payloads.
        if not (info.context and info.context.get(WIRE_CONTEXT_KEY)) or not isinstance(data, dict):
            return data
        wire_keys = {field.alias or name for name, field in cls.model_fields.items()}
        # Unknown keys take precedence and are reported as ``extra_forbidden``.
        if "text" not in data and set(data) <= wire_keys:
            raise PydanticCustomError("text_missing", "Field required")
        return data

    @classmethod
    def from_json(cls, data: str | bytes) -> Chat:
        """Validate a JSON payload, requiring ``text`` on every component."""
        return cls.model_validate_json(data, context={WIRE_CONTEXT_KEY: True}, by_alias=True, by_name=False)

    @classmethod
    def from_text(cls, text: str) -> Chat:
        """Return a component carrying only ``text``."""
        return cls(text=text)

    def add_extra(self, extra: Chat) -> Chat:
        """Append a component to the ``extra`` list."""
        self.extra.append(extra)
        return self

    def set_extras(self, extras: Iterable[Chat]) -> Chat:
        """Replace the ``extra`` list with the given components."""
        self.extra = list(extras)
        return self

    def with_color(self, color: Color) -> Chat:
        """Set the text color."""
        self.color = Color(color)
        return self

    def with_bold(self) -> Chat:
        """Enable boldface."""
        self.bold = True
        return self

    def no_bold(self) -> Chat:
        """Disable boldface."""
        self.bold = False
        return self

    def with_italic(self) -> Chat:
        """Enable italics."""
        self.italic = True
        return self

    def no_italic(self) -> Chat:
        """Disable italics."""
        self.italic = False
        return self

    def with_underlined(self) -> Chat:
        """Enable underline."""
        self.underlined = True
        return self

    def no_underlined(self) -> Chat:
        """Disable underline."""
        self.underlined = False
        return self

    def with_strikethrough(self) -> Chat:
        """Enable strike-through."""
        self.strikethrough = True
        return self

    def no_strikethrough(self) -> Chat:
        """Disable strike-through."""
        self.strikethrough = False
        return self

    def with_obfuscated(self) -> Chat:
        """Render the text with characters randomly swapped for others of the same width."""
        self.obfuscated = True
        return self

    def no_obfuscated(self) -> Chat:
        """Disable obfuscation."""
        self.obfuscated = False
        return self

    def on_click(self, event: ClickEvent) -> Chat:
        """Set the action performed when the component is clicked."""
        self.click_event = event
        return self

    def on_hover(self, event: HoverEvent) -> Chat:
        """Set the action performed when the mouse hovers over the component."""
        self.hover_event = event
        return self

    def to_json(self, indent: int | None = None) -> str:
        """Encode the component tree using the wire field names."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)

    def __str__(self) -> str:
        try:
            return self.to_json()
        except (PydanticSerializationError, TypeError, ValueError):
            raise FormattingError("chat component could not be formatted") from None


ShowText.model_rebuild()
EntityContents.model_rebuild()
Chat.model_rebuild()
