from __future__ import annotations

import json
import sys
from pathlib import Path
from uuid import UUID

repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from rawchat import decode, encode
from rawchat.config.settings import CodecSettings
from rawchat.models import (
    ChangePage,
    Chat,
    Color,
    CopyToClipboard,
    EntityContents,
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
from rawchat.services.chat_codec import ChatCodec

ENTITY_ID = UUID("f84c6a79-0a4e-45e0-879b-cd49ebd4c4e2")


def _sample_chat() -> Chat:
    tooltip = Chat(text="Click me").with_italic().with_color(Color.GRAY)
    entity = EntityContents(name=Chat(text="Steve"), entity_type="minecraft:player", id=ENTITY_ID)
    return (
        Chat(text="Welcome ")
        .with_color(Color.GOLD)
        .no_bold()
        .add_extra(Chat(text="docs").on_click(OpenUrl(value="https://example.com")).on_hover(ShowText(contents=tooltip)))
        .add_extra(Chat(text=" item").on_hover(ShowItem(contents=ItemContents(id="minecraft:diamond", count=3))))
        .add_extra(Chat(text=" player").with_obfuscated().on_hover(ShowEntity(contents=entity)))
    )


def test_default_chat_encodes_only_text() -> None:
    assert json.loads(encode(Chat())) == {"text": ""}


def test_nested_example_omits_absent_fields() -> None:
    chat = Chat().set_extras([Chat(text="Hello, "), Chat(text="World!").with_bold()])

    assert json.loads(encode(chat)) == {
        "text": "",
        "extra": [
            {"text": "Hello, "},
            {"text": "World!", "bold": True},
        ],
    }


def test_encoding_never_emits_null() -> None:
    item = ShowItem(contents=ItemContents(id="minecraft:stone"))
    encoded = encode(Chat(text="x").on_hover(item))

    assert "null" not in encoded
    assert json.loads(encoded)["hoverEvent"] == {
        "action": "show_item",
        "contents": {"id": "minecraft:stone"},
    }


def test_events_use_camel_case_wire_names() -> None:
    encoded = json.loads(encode(_sample_chat()))
    docs = encoded["extra"][0]

    assert docs["clickEvent"] == {"action": "open_url", "value": "https://example.com"}
    assert docs["hoverEvent"]["action"] == "show_text"
    assert docs["hoverEvent"]["contents"] == {"text": "Click me", "color": "gray", "italic": True}
    assert "click_event" not in docs
    assert "hover_event" not in docs


def test_show_entity_uses_type_key_and_hyphenated_uuid() -> None:
    encoded = json.loads(encode(_sample_chat()))
    contents = encoded["extra"][2]["hoverEvent"]["contents"]

    assert contents == {
        "name": {"text": "Steve"},
        "type": "minecraft:player",
        "id": "f84c6a79-0a4e-45e0-879b-cd49ebd4c4e2",
    }


def test_round_trip_preserves_tree() -> None:
    chat = _sample_chat()

    decoded = decode(encode(chat))

    assert decoded == chat
    assert decoded.bold is False
    assert decoded.italic is None
    assert decoded.extra[2].hover_event.contents.id == ENTITY_ID


def test_round_trip_covers_every_click_variant() -> None:
    events = [
        OpenUrl(value="https://example.com"),
        OpenFile(value="screenshots/a.png"),
        RunCommand(value="/say hi"),
        SuggestCommand(value="/msg "),
        ChangePage(value="2"),
        CopyToClipboard(value="secret"),
    ]
    chat = Chat().set_extras(Chat(text=str(i)).on_click(event) for i, event in enumerate(events))

    decoded = decode(encode(chat))

    assert [child.click_event for child in decoded.extra] == events
    assert [type(child.click_event) for child in decoded.extra] == [type(event) for event in events]


def test_decode_fills_defaults_for_absent_fields() -> None:
    chat = decode('{"text": "plain"}')

    assert chat == Chat.from_text("plain")


def test_decode_accepts_bytes() -> None:
    chat = decode(b'{"text": "", "extra": [{"text": "a", "color": "dark_red"}]}')

    assert chat.extra[0].color is Color.DARK_RED


def test_decode_accepts_explicit_false_flags() -> None:
    chat = decode('{"text": "x", "bold": false, "strikethrough": true}')

    assert chat.bold is False
    assert chat.strikethrough is True
    assert chat.italic is None


def test_str_matches_compact_encoding() -> None:
    chat = _sample_chat()

    assert str(chat) == encode(chat)


def test_codec_indent_comes_from_settings() -> None:
    codec = ChatCodec(CodecSettings(json_indent=2))
    chat = Chat(text="a").with_bold()

    encoded = codec.encode(chat)

    assert "\n" in encoded
    assert json.loads(encoded) == {"text": "a", "bold": True}


def test_explicit_indent_overrides_compact_default() -> None:
    codec = ChatCodec(CodecSettings())
    chat = Chat(text="a")

    assert codec.encode(chat) == '{"text":"a"}'
    assert codec.encode(chat, indent=2) == '{\n  "text": "a"\n}'


def test_decode_legacy_ignores_unknown_keys() -> None:
    codec = ChatCodec(CodecSettings())

    legacy = codec.decode_legacy('{"text": "hi", "color": "red", "bold": true, "extra": []}')

    assert legacy == LegacyChat(text="hi", color=Color.RED)
    assert legacy.upgrade() == Chat(text="hi").with_color(Color.RED)


def test_legacy_encoding_omits_missing_color() -> None:
    assert json.loads(LegacyChat(text="hi").model_dump_json(by_alias=True)) == {"text": "hi"}
