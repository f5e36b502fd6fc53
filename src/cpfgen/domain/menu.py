"""Interactive menu options and choice parsing.

Parsing returns a :class:`ParsedChoice` rather than raising, so the menu
loop branches on ``ok`` instead of catching exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

RULE = "-------------------------------"
MENU_WIDTH = len(RULE)

INVALID_INPUT_MESSAGE = "Invalid input. Only integer numbers are allowed."
INVALID_OPTION_MESSAGE = "Invalid option. Try again!!"
EXIT_MESSAGE = "Exiting..."
PROMPT = "Choose an option"


class MenuOption(IntEnum):
    GENERATE = 1
    EXIT = 2


MENU_LABELS: dict[MenuOption, str] = {
    MenuOption.GENERATE: "Generate new CPF",
    MenuOption.EXIT: "Exit",
}


@dataclass(frozen=True)
class ParsedChoice:
    """Outcome of parsing one line of menu input."""

    ok: bool
    value: int | None = None
    error: str | None = None

    @property
    def option(self) -> MenuOption | None:
        """The matching menu option, or None for unknown integers."""
        if self.value is None:
            return None
        try:
            return MenuOption(self.value)
        except ValueError:
            return None


def parse_choice(raw: str) -> ParsedChoice:
    """Parse one token as a (possibly signed) integer."""
    text = raw.strip()
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not digits.isascii() or not digits.isdigit():
        return ParsedChoice(ok=False, error=INVALID_INPUT_MESSAGE)
    return ParsedChoice(ok=True, value=int(text))


def render_menu(title: str = "CPF GENERATOR") -> str:
    """Build the boxed menu text."""
    inner = MENU_WIDTH - 2
    spare = max(inner - len(title), 0)
    # Title sits one column right of centre.
    left = min(spare // 2 + 1, spare)
    lines = [RULE, f"|{' ' * left}{title:<{inner - left}}|", RULE]
    for option, label in MENU_LABELS.items():
        lines.append(f"|{f' [ {option.value} ] - {label}':<{inner}}|")
    lines.append(RULE)
    return "\n".join(lines)
