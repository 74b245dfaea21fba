"""Initial deal."""

import logging
import random

from klondike.models.card import Card, create_deck, shuffle_deck
from klondike.models.game_state import NUM_TABLEAUS, GameState

logger = logging.getLogger(__name__)

# Cards consumed by the triangular deal (1 + 2 + ... + 7)
TABLEAU_CARDS = NUM_TABLEAUS * (NUM_TABLEAUS + 1) // 2


def deal_to_tableau(deck: list[Card]) -> tuple[list[Card], list[list[Card]]]:
    """Deal cards from the deck into the seven tableau columns.

    Column i (0-based) receives the next i+1 cards in deck order and only the
    last card dealt to it is turned face-up.

    Args:
        deck: Cards to deal from (not modified)

    Returns:
        Tuple of (remaining cards in deck order, tableau columns)
    """
    if len(deck) < TABLEAU_CARDS:
        raise ValueError(f"Need at least {TABLEAU_CARDS} cards to deal, got {len(deck)}")

    tableaus: list[list[Card]] = []
    index = 0
    for column in range(NUM_TABLEAUS):
        pile = list(deck[index:index + column + 1])
        index += column + 1
        pile[-1] = pile[-1].flipped(True)
        tableaus.append(pile)

    return list(deck[index:]), tableaus


def initialize_game(rng: random.Random | None = None) -> GameState:
    """Create, shuffle and deal a new game.

    Args:
        rng: Random source for the shuffle (module-level generator if None)

    Returns:
        GameState with the deal in place and empty waste and foundations
    """
    deck = create_deck()
    shuffle_deck(deck, rng)
    stock, tableaus = deal_to_tableau(deck)

    state = GameState(stock=stock, tableaus=tableaus)
    logger.debug(f"Game dealt: {state}")
    return state
