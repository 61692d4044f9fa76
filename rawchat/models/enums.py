"""Enumerations used across the chat schema."""

from enum import Enum


class Color(str, Enum):
    """Named text colors available to a chat component.

    The protocol only knows these sixteen names.  Values are the exact
    snake_case strings used on the wire; there is no hex or custom color
    support.
    """

    BLACK = "black"
    DARK_BLUE = "dark_blue"
    DARK_GREEN = "dark_green"
    DARK_AQUA = "dark_aqua"
    DARK_RED = "dark_red"
    DARK_PURPLE = "dark_purple"
    GOLD = "gold"
    GRAY = "gray"
    DARK_GRAY = "dark_gray"
    BLUE = "blue"
    GREEN = "green"
    AQUA = "aqua"
    RED = "red"
    LIGHT_PURPLE = "light_purple"
    YELLOW = "yellow"
    WHITE = "white"


class ClickAction(str, Enum):
    """Discriminators of the click event variants."""

    OPEN_URL = "open_url"
    OPEN_FILE = "open_file"
    RUN_COMMAND = "run_command"
    SUGGEST_COMMAND = "suggest_command"
    CHANGE_PAGE = "change_page"
    COPY_TO_CLIPBOARD = "copy_to_clipboard"


class HoverAction(str, Enum):
    """Discriminators of the hover event variants."""

    SHOW_TEXT = "show_text"
    SHOW_ITEM = "show_item"
    SHOW_ENTITY = "show_entity"
