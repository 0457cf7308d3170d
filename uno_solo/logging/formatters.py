"""Formatters for game log output."""

from uno_solo.models.card import Card, CardKind, Color

# Color codes for log output
COLOR_CODES: dict[Color, str] = {
    Color.RED: "R",
    Color.BLUE: "B",
    Color.GREEN: "G",
    Color.YELLOW: "Y",
}

# Suffixes for action cards
KIND_CODES: dict[CardKind, str] = {
    CardKind.SKIP: "S",
    CardKind.REVERSE: "R",
    CardKind.DRAW_TWO: "D2",
}


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "R3" for Red 3, "BS" for Blue Skip, "W" for Wild).
    """
    if card.is_wild:
        return "W"
    if card.color is None:
        raise ValueError("Non-wild card must have a color")
    if card.kind == CardKind.NUMBER:
        return f"{COLOR_CODES[card.color]}{card.rank}"
    return f"{COLOR_CODES[card.color]}{KIND_CODES[card.kind]}"


def format_cards(cards: list[Card]) -> str:
    """Format cards to a comma-separated string in list order.

    Returns:
        Comma-separated card strings (e.g., "R3,BS,W").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)
