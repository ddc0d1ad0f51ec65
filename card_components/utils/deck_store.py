import os
from pathlib import Path
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from card_components.card_utils.card import Card
from card_logs.loggers import deck_logger

DECK_PATH = Path(os.getenv("CARD_DECK_FILE", "cards.json"))

_deck_adapter = TypeAdapter(List[Card])


def open_deck_file(path: Optional[Path] = None) -> Path:
    """
    Make sure the deck file exists, creating an empty one if needed.

    OSError is left to the caller: a deck file that cannot be created or
    opened leaves nothing useful to do.
    """
    path = Path(path or DECK_PATH)
    if not path.exists():
        path.touch()
        deck_logger.info("deck_file_created", path=str(path))
    return path


def dump_cards(cards: List[Card]) -> str:
    return _deck_adapter.dump_json(cards).decode("utf-8")


def load_cards(path: Optional[Path] = None) -> Optional[List[Card]]:
    """
    Read the whole deck from disk.

    Returns None when the file is empty or does not hold a JSON array of
    cards. That is a normal start, not an error: the caller begins with an
    empty deck and the next save overwrites whatever was there.
    """
    path = open_deck_file(path)
    raw = path.read_bytes()

    if not raw.strip():
        deck_logger.warning("deck_load_fallback", path=str(path), reason="empty")
        return None

    try:
        cards = _deck_adapter.validate_json(raw)
    except ValidationError as e:
        deck_logger.warning(
            "deck_load_fallback",
            path=str(path),
            reason="unparseable",
            errors=e.error_count(),
        )
        return None

    deck_logger.info("deck_loaded", path=str(path), count=len(cards))
    return cards


def save_cards(cards: List[Card], path: Optional[Path] = None) -> bool:
    """
    Overwrite the deck file with the full, ordered collection.

    Returns False on a write or serialization failure. The in-memory deck
    stays authoritative and the next save tries again.
    """
    path = Path(path or DECK_PATH)
    try:
        content = dump_cards(cards)
        path.write_text(content, encoding="utf-8")
    except (OSError, PydanticSerializationError) as e:
        deck_logger.error("deck_save_failed", path=str(path), error=str(e))
        return False

    deck_logger.info("deck_saved", path=str(path), count=len(cards))
    return True
