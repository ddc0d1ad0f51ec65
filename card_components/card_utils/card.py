# card data model.
# One persisted deck entry. Only the shape is checked here; the per-field
# rules (length limits, url and image checks) run in validators.py when a
# card is built, and are not re-applied when a deck file is loaded.
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

MAX_TURNS = 4294967295


class Card(BaseModel):
    model_config = ConfigDict(strict=True)

    title: Optional[str] = None
    text: str
    background: Optional[str] = None
    turns: Optional[int] = Field(default=None, ge=0, le=MAX_TURNS)
