"""Error handling utilities and custom exceptions."""

from __future__ import annotations

from typing import Any, Sequence

from pydantic import ValidationError


class ChatError(Exception):
    """Base class for every error raised by the chat schema."""

    pass


class DecodeError(ChatError):
    """Raised when a payload does not match the chat schema.

    ``location`` is the path to the offending value inside the payload,
    using wire field names and list indices.  ``errors`` keeps the full
    list of pydantic error details for callers that want all of them.
    """

    def __init__(
        self,
        message: str,
        *,
        location: Sequence[Any] = (),
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.location = tuple(location)
        self.errors = errors or []

    @property
    def field(self) -> str | None:
        """Return the innermost field name of ``location`` if there is one."""
        for part in reversed(self.location):
            if isinstance(part, str):
                return part
        return None


class UnknownFieldError(DecodeError):
    """An object contained a key the schema does not define."""


class TypeMismatchError(DecodeError):
    """A value had the wrong type or shape."""


class MissingFieldError(TypeMismatchError):
    """A required key was absent."""


class InvalidDiscriminatorError(DecodeError):
    """A click or hover event named an unknown ``action``."""


class MalformedTextError(DecodeError):
    """The input was not valid JSON."""


class FormattingError(ChatError):
    """A chat component could not be rendered to text."""


_ERROR_TYPES: dict[str, type[DecodeError]] = {
    "extra_forbidden": UnknownFieldError,
    "union_tag_invalid": InvalidDiscriminatorError,
    "missing": MissingFieldError,
    "text_missing": MissingFieldError,
    "union_tag_not_found": MissingFieldError,
    "json_invalid": MalformedTextError,
}


def _format_location(location: Sequence[Any]) -> str:
    return ".".join(str(part) for part in location) or "<root>"


def translate_validation_error(exc: ValidationError) -> DecodeError:
    """Convert a pydantic ``ValidationError`` into a :class:`DecodeError`.

    The first reported error decides the subclass.  Error types without a
    dedicated subclass are treated as shape mismatches.
    """
    details = exc.errors(include_url=False)
    if not details:
        return DecodeError(str(exc))
    first = details[0]
    error_cls = _ERROR_TYPES.get(first["type"], TypeMismatchError)
    location = tuple(first.get("loc", ()))
    if first["type"] == "text_missing":
        location += ("text",)
    message = "{location}: {msg}".format(location=_format_location(location), msg=first["msg"])
    return error_cls(message, location=location, errors=details)
