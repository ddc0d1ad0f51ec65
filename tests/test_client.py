import pytest

from card_components.card_utils.card import Card
from card_components.utils.deck_store import load_cards, save_cards
from frontend_client import client as client_mod
from frontend_client.client import DeckClient, take_input


def test_take_input_trims_and_blanks(feed_input):
    feed_input("  hi  ", "   ")
    assert take_input() == "hi"
    assert take_input() is None


def test_take_input_eof_is_fatal(feed_input):
    feed_input()
    with pytest.raises(SystemExit) as exc:
        take_input()
    assert exc.value.code == 1


def test_take_input_eof_as_blank(feed_input):
    feed_input()
    assert take_input(eof_as_blank=True) is None


@pytest.mark.parametrize("error", [
    UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte"),
    OSError("Input/output error"),
])
def test_take_input_read_failure_is_fatal(monkeypatch, capsys, error):
    def broken_input(prompt=""):
        raise error
    monkeypatch.setattr("builtins.input", broken_input)

    with pytest.raises(SystemExit) as exc:
        take_input(eof_as_blank=True)
    assert exc.value.code == 1
    assert "Couldn't read from terminal" in capsys.readouterr().out


def test_eof_at_menu_exits_cleanly(deck_path, feed_input, monkeypatch):
    monkeypatch.setattr(client_mod, "DECK_PATH", deck_path)
    feed_input()
    assert client_mod.main() == 0


def test_eof_after_card_saves_and_leaves(deck_path, feed_input):
    deck = DeckClient(deck_path)
    feed_input("1", "", "last", "", "")
    deck.run()
    assert load_cards(deck_path) == [Card(text="last")]


def test_eof_mid_card_is_fatal(deck_path, feed_input):
    deck = DeckClient(deck_path)
    feed_input("1", "")
    with pytest.raises(SystemExit) as exc:
        deck.run()
    assert exc.value.code == 1


def test_fresh_start_add_one_card(deck_path, feed_input, capsys):
    deck = DeckClient(deck_path)
    deck.load()
    assert deck.cards == []

    feed_input(
        "1",                     # menu: add
        "", "Hello", "", "",     # title, text, background, turns
        "n",                     # no more cards
        "",                      # blank at menu exits
    )
    deck.run()

    assert deck.cards == [Card(text="Hello")]
    assert "Card added" in capsys.readouterr().out

    reloaded = DeckClient(deck_path)
    reloaded.load()
    assert reloaded.cards == [Card(text="Hello")]


def test_add_several_cards(deck_path, feed_input):
    deck = DeckClient(deck_path)
    deck.load()
    feed_input(
        "1",
        "", "one", "", "", "y",
        "Two", "two", "https://example.com/2.jpg", "2", "",
        "3",
    )
    deck.run()

    assert load_cards(deck_path) == [
        Card(text="one"),
        Card(title="Two", text="two", background="https://example.com/2.jpg", turns=2),
    ]


def test_load_existing_deck(deck_path, sample_cards, capsys):
    save_cards(sample_cards, deck_path)
    deck = DeckClient(deck_path)
    deck.load()
    assert deck.cards == sample_cards
    assert "Successfully loaded" in capsys.readouterr().out


def test_corrupted_deck_is_replaced_on_next_add(deck_path, sample_cards, feed_input):
    save_cards(sample_cards, deck_path)
    deck_path.write_text("[{broken")

    deck = DeckClient(deck_path)
    deck.load()
    assert deck.cards == []

    feed_input("1", "", "New", "", "", "n", "3")
    deck.run()
    assert load_cards(deck_path) == [Card(text="New")]


def test_failed_save_keeps_memory_and_warns(deck_path, feed_input, capsys, monkeypatch):
    monkeypatch.setattr(client_mod, "save_cards", lambda cards, path: False)
    deck = DeckClient(deck_path)
    feed_input("1", "", "kept", "", "", "n", "")
    deck.run()

    assert deck.cards == [Card(text="kept")]
    assert "Error writing to file" in capsys.readouterr().out


def test_display_does_not_mutate(deck_path, sample_cards, capsys):
    deck = DeckClient(deck_path)
    deck.cards = list(sample_cards)
    deck.display_cards()

    out = capsys.readouterr().out
    assert "Nobody may speak for %TURNS% turns" in out
    assert deck.cards == sample_cards


def test_display_empty(deck_path, capsys):
    DeckClient(deck_path).display_cards()
    assert "No cards to display" in capsys.readouterr().out


def test_invalid_menu_choice_reprompts(deck_path, feed_input, capsys):
    deck = DeckClient(deck_path)
    feed_input("9", "2", "3")
    deck.run()
    out = capsys.readouterr().out
    assert "Invalid input" in out
    assert "No cards to display" in out


def test_main_fatal_when_deck_cannot_open(tmp_path, monkeypatch):
    monkeypatch.setattr(client_mod, "DECK_PATH", tmp_path / "nope" / "cards.json")
    with pytest.raises(SystemExit) as exc:
        client_mod.main()
    assert exc.value.code == 1


def test_main_exits_cleanly(deck_path, feed_input, monkeypatch):
    monkeypatch.setattr(client_mod, "DECK_PATH", deck_path)
    feed_input("")
    assert client_mod.main() == 0
