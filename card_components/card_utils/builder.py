# card builder.
# Walks the four card fields in a fixed order, re-asking for a field until
# its validator accepts the input. There is no way back to an earlier field.
from typing import Callable, Optional

from card_logs.loggers import builder_logger

from .card import Card
from .validators import (
    FieldError,
    validate_background,
    validate_text,
    validate_title,
    validate_turns,
)


class CardBuilder:
    """Assemble one Card from line-by-line user input.

    `ask(field_name)` returns one trimmed line for that field, or None when
    the line was blank. `on_reject(field_name, error)` is told about every
    rejected value before the field is asked for again.

    Blank input means "absent" for title, background and turns. For text it
    is rejected with `Required`, so the builder keeps asking.
    """

    STEPS = (
        ("title", validate_title),
        ("text", validate_text),
        ("background", validate_background),
        ("turns", validate_turns),
    )

    def __init__(
        self,
        ask: Callable[[str], Optional[str]],
        on_reject: Optional[Callable[[str, FieldError], None]] = None,
    ):
        self.ask = ask
        self.on_reject = on_reject

    def take_field(self, field_name: str, validator):
        while True:
            raw = self.ask(field_name)
            try:
                return validator(raw)
            except FieldError as e:
                builder_logger.debug("field_rejected", field=field_name, reason=str(e))
                if self.on_reject:
                    self.on_reject(field_name, e)

    def build(self) -> Card:
        values = {}
        for field_name, validator in self.STEPS:
            values[field_name] = self.take_field(field_name, validator)

        card = Card(**values)
        builder_logger.info(
            "card_built",
            has_title=card.title is not None,
            has_background=card.background is not None,
            turns=card.turns,
        )
        return card
