# field validators for card input.
# Each validator takes one trimmed line (None or "" meaning the user left it
# blank) and returns the typed value, None for an absent optional field, or
# raises a FieldError. No terminal I/O happens here.
import re
from typing import Optional

from pydantic import AnyUrl, TypeAdapter, ValidationError

from .card import MAX_TURNS

EXTENSIONS = ("png", "jpg", "jpeg", "gif", "webp")
PROMPT_LIMIT = 254
TITLE_LIMIT = 16

_url_adapter = TypeAdapter(AnyUrl)
_turns_pattern = re.compile(r"\+?[0-9]+")


class FieldError(ValueError):
    """Base class for a rejected field value. str() is the user-facing reason."""


class TooLong(FieldError):
    def __init__(self, excess: int):
        self.excess = excess
        super().__init__(f"Your input was {excess} characters too long")


class Required(FieldError):
    def __init__(self):
        super().__init__("The prompt cant be empty.")


class InvalidUrl(FieldError):
    def __init__(self):
        super().__init__("not a valid url")


class InvalidImageExtension(FieldError):
    def __init__(self):
        super().__init__("not a valid image url")


class NotANumber(FieldError):
    def __init__(self):
        super().__init__("Couldn't parse this as a number")


def _check_length(raw: str, limit: int) -> str:
    # len() counts code points, which matches a Unicode scalar count
    char_count = len(raw)
    if char_count > limit:
        raise TooLong(char_count - limit)
    return raw


def validate_title(raw: Optional[str]) -> Optional[str]:
    if not raw:
        return None
    return _check_length(raw, TITLE_LIMIT)


def validate_text(raw: Optional[str]) -> str:
    if not raw:
        raise Required()
    return _check_length(raw, PROMPT_LIMIT)


def validate_background(raw: Optional[str]) -> Optional[str]:
    """Accept an absolute URL whose text ends with an image extension.

    The extension is matched against the whole raw string, query and
    fragment included, not only the URL path.
    """
    if not raw:
        return None
    try:
        _url_adapter.validate_python(raw)
    except ValidationError:
        raise InvalidUrl() from None
    if not raw.endswith(EXTENSIONS):
        raise InvalidImageExtension()
    return raw


def validate_turns(raw: Optional[str]) -> Optional[int]:
    if not raw:
        return None
    # int() alone would also take "1_000", inner spaces and non-ASCII digits
    if not _turns_pattern.fullmatch(raw):
        raise NotANumber()
    # leading zeros are fine however many there are; past MAX_TURNS' width
    # int() would hit the interpreter's digit limit on very long input
    digits = raw.lstrip("+").lstrip("0")
    if len(digits) > len(str(MAX_TURNS)):
        raise NotANumber()
    turns = int(digits or "0")
    if turns > MAX_TURNS:
        raise NotANumber()
    return turns
