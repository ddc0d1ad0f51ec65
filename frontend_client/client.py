import sys
from pathlib import Path
from typing import List, Optional

from card_components.card_utils.builder import CardBuilder
from card_components.card_utils.card import Card
from card_components.card_utils.validators import FieldError
from card_components.utils.deck_store import DECK_PATH, load_cards, save_cards
from frontend_client.utils.pretty_display import (
    clear_screen,
    format_card,
    print_border,
    print_error,
    print_help,
    print_info,
    print_loaded,
    print_menu,
    print_prompt,
    print_success,
    print_warning,
)

# field name -> (prompt, optional)
FIELD_PROMPTS = {
    "title": ("Enter the card title:", True),
    "text": ("Enter the card prompt:", False),
    "background": ("Enter the cards's background url:", True),
    "turns": ("Enter how many turns the card must last:", True),
}


def take_input(eof_as_blank: bool = False) -> Optional[str]:
    """Read one trimmed line from the terminal. A blank line gives None.

    End of input reads as a blank line when `eof_as_blank` is set (menu and
    yes/no prompts, where blank means leave). Anywhere else, and for any
    read or decode failure, it is fatal.
    """
    try:
        buffer = input()
    except EOFError:
        if eof_as_blank:
            return None
        print_error("Couldn't read from terminal")
        sys.exit(1)
    except (UnicodeDecodeError, OSError) as e:
        print_error(f"Couldn't read from terminal: {e}")
        sys.exit(1)
    buffer = buffer.strip()
    if not buffer:
        return None
    return buffer


def ask_field(field_name: str) -> Optional[str]:
    if field_name == "text":
        print_help()
    prompt, optional = FIELD_PROMPTS[field_name]
    print_prompt(prompt, optional=optional)
    return take_input()


def report_rejection(field_name: str, error: FieldError):
    print_error(str(error))


class DeckClient:
    def __init__(self, deck_path: Optional[Path] = None):
        self.deck_path = Path(deck_path or DECK_PATH)
        self.cards: List[Card] = []
        self.builder = CardBuilder(ask_field, on_reject=report_rejection)

    def load(self):
        """Load the deck from disk. OSError opening the file is left to the caller."""
        cards = load_cards(self.deck_path)
        if cards is None:
            self.cards = []
            print_info("No cards found. Creating new cards.")
        else:
            self.cards = cards
            print_loaded(len(cards))

    def add_card_loop(self):
        while True:
            card = self.builder.build()
            self.cards.append(card)
            clear_screen()

            if save_cards(self.cards, self.deck_path):
                print_success("Card added")
            else:
                print_error("Error writing to file")

            print_warning("Add another card? (y/n)")
            if take_input(eof_as_blank=True) == "y":
                clear_screen()
                continue
            print_info("Exiting...")
            break

    def display_cards(self):
        if not self.cards:
            print_error("No cards to display")
            return

        print_warning("Displaying cards...")
        for card in self.cards:
            print_border()
            print(format_card(card))
        print_border()

    def run(self):
        while True:
            print_menu()
            choice = take_input(eof_as_blank=True)
            clear_screen()

            match choice:
                case None | '3':
                    print_info("Exiting...")
                    return
                case '1':
                    self.add_card_loop()
                case '2':
                    self.display_cards()
                case _:
                    print_error("Invalid input")


def main():
    client = DeckClient()
    try:
        client.load()
    except OSError as e:
        print_error(f"Couldn't open or create file: {e}")
        sys.exit(1)
    client.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
