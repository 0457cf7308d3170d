"""Legality rule for placing a card on the discard pile."""

from uno_solo.models.card import Card, CardKind


def can_play(candidate: Card, top: Card) -> bool:
    """Check whether `candidate` may be placed on `top`.

    Rules:
    - Wild on anything, or anything on Wild: legal
    - Number on Number: same color and same rank
    - Skip/Reverse/DrawTwo on the same kind: same color
    - Anything else: illegal

    Args:
        candidate: Card being played
        top: Current top card of the discard pile

    Returns:
        True if the play is legal
    """
    if candidate.is_wild or top.is_wild:
        return True

    # Different kinds never match (e.g. Skip on Reverse, Number on Skip)
    if candidate.kind != top.kind:
        return False

    if candidate.kind == CardKind.NUMBER:
        return candidate.color == top.color and candidate.rank == top.rank

    return candidate.color == top.color


def find_playable(hand: list[Card], top: Card) -> int | None:
    """Find the first legal card in hand order.

    Returns:
        Index into `hand`, or None if no card can be played.
    """
    for index, card in enumerate(hand):
        if can_play(card, top):
            return index
    return None
