# pretty print display stuff
# Only ever renders values that have already been validated.

RED = '\033[31m'
GREEN = '\033[32m'
CYAN = '\033[36m'
YELLOW = '\033[33m'
BOLD = '\033[1m'
ITALIC = '\033[3m'
UNDERLINE = '\033[4m'
RESET = '\033[0m'
CLEAR_SCREEN = '\033[2J'

PLACEHOLDERS = {
    '"%PREVIOUS_PLAYER%"': "Displays the previous player in the list",
    '"%NEXT_PLAYER%"': "Displays the next player in the list",
    '"%PLAYER%"': "Displays a random player.",
    '"%SELF%"': "Displays the user whose turn it is currently",
    '"%TURNS%"': "Displays how many turns the card lasts",
}

MENU_OPTIONS = {
    '1': 'Add a card',
    '2': 'View cards',
    '3': 'Exit',
}


def print_info(message: str):
    print(f"{CYAN}{message}{RESET}")

def print_success(message: str):
    print(f"{GREEN}{BOLD}{message}{RESET}")

def print_warning(message: str):
    print(f"{YELLOW}{BOLD}{message}{RESET}")

def print_error(message: str):
    print(f"{RED}{BOLD}{message}{RESET}")

def print_border():
    print("\n----------------------\n")

def clear_screen():
    print(CLEAR_SCREEN, end='')

def print_prompt(message: str, optional: bool = False):
    suffix = f" {CYAN}{ITALIC}(optional){RESET}" if optional else ""
    print(f"{CYAN}{BOLD}{message}{RESET}{suffix}")

def print_help():
    for placeholder, description in PLACEHOLDERS.items():
        print(f"{GREEN}{placeholder}{RESET} {CYAN}{ITALIC}{description}{RESET}")

def print_menu():
    print(f"{CYAN}{BOLD}What would you like to do?{RESET}")
    for key, value in MENU_OPTIONS.items():
        print(f"{CYAN}{BOLD}{key}. {value}{RESET}")

def print_loaded(count: int):
    print(f"{GREEN}{BOLD}Successfully loaded{RESET} "
          f"{GREEN}{UNDERLINE}{count}{RESET} {GREEN}{BOLD}cards.{RESET}")


def _line(label: str, value) -> str:
    return f"{GREEN}{BOLD}{label}{RESET} {CYAN}{ITALIC}{value}{RESET}"

def format_card(card) -> str:
    """Render a card as four labelled lines. Absent fields show as "" or 0."""
    return "\n".join([
        _line("Title:", card.title or ""),
        _line("Prompt:", card.text),
        _line("background:", card.background or ""),
        _line("Turns:", card.turns or 0),
    ])
