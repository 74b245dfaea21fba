"""Game state models."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from .card import DECK_SIZE, FOUNDATION_SUITS, Card, Rank, Suit

NUM_FOUNDATIONS = 4
NUM_TABLEAUS = 7


class PileKind(str, Enum):
    """Family a pile belongs to."""

    STOCK = "stock"
    WASTE = "waste"
    FOUNDATION = "foundation"
    TABLEAU = "tableau"


# Identifier prefix for each movable pile family
PILE_PREFIXES = {
    PileKind.WASTE: "W",
    PileKind.FOUNDATION: "F",
    PileKind.TABLEAU: "T",
}


class PileRef(BaseModel, frozen=True):
    """Reference to one pile by family and 0-based index."""

    kind: PileKind
    index: int = 0

    @property
    def identifier(self) -> str:
        """Get the command identifier (e.g. "W", "T3", "F1")."""
        if self.kind == PileKind.STOCK:
            return "stock"
        if self.kind == PileKind.WASTE:
            return "W"
        return f"{PILE_PREFIXES[self.kind]}{self.index + 1}"

    @property
    def suit(self) -> Suit | None:
        """Get the fixed suit of a foundation (None for other piles)."""
        if self.kind == PileKind.FOUNDATION:
            return FOUNDATION_SUITS[self.index]
        return None

    def __str__(self) -> str:
        return self.identifier


STOCK = PileRef(kind=PileKind.STOCK)
WASTE = PileRef(kind=PileKind.WASTE)


def foundation(index: int) -> PileRef:
    """Reference to foundation pile (0-based)."""
    return PileRef(kind=PileKind.FOUNDATION, index=index)


def tableau(index: int) -> PileRef:
    """Reference to tableau pile (0-based)."""
    return PileRef(kind=PileKind.TABLEAU, index=index)


class GameState(BaseModel):
    """Overall game state.

    Piles are stored bottom-to-top: the last card of each list is the top
    card. Access goes through get_pile/set_pile so that no list object is
    shared between two piles.
    """

    stock: list[Card] = Field(default_factory=list)
    waste: list[Card] = Field(default_factory=list)
    foundations: list[list[Card]] = Field(
        default_factory=lambda: [[] for _ in range(NUM_FOUNDATIONS)]
    )
    tableaus: list[list[Card]] = Field(
        default_factory=lambda: [[] for _ in range(NUM_TABLEAUS)]
    )

    @field_validator("foundations")
    @classmethod
    def _check_foundation_count(cls, value: list[list[Card]]) -> list[list[Card]]:
        if len(value) != NUM_FOUNDATIONS:
            raise ValueError(f"Expected {NUM_FOUNDATIONS} foundations, got {len(value)}")
        return value

    @field_validator("tableaus")
    @classmethod
    def _check_tableau_count(cls, value: list[list[Card]]) -> list[list[Card]]:
        if len(value) != NUM_TABLEAUS:
            raise ValueError(f"Expected {NUM_TABLEAUS} tableaus, got {len(value)}")
        return value

    def get_pile(self, ref: PileRef) -> list[Card]:
        """Get a copy of the cards in a pile (bottom to top)."""
        if ref.kind == PileKind.STOCK:
            return list(self.stock)
        if ref.kind == PileKind.WASTE:
            return list(self.waste)
        if ref.kind == PileKind.FOUNDATION:
            return list(self.foundations[ref.index])
        return list(self.tableaus[ref.index])

    def set_pile(self, ref: PileRef, cards: list[Card]) -> None:
        """Replace the contents of a pile."""
        cards = list(cards)
        if ref.kind == PileKind.STOCK:
            self.stock = cards
        elif ref.kind == PileKind.WASTE:
            self.waste = cards
        elif ref.kind == PileKind.FOUNDATION:
            self.foundations[ref.index] = cards
        else:
            self.tableaus[ref.index] = cards

    # Read-only views for renderers

    @property
    def stock_count(self) -> int:
        """Number of cards left in the stock."""
        return len(self.stock)

    def waste_top(self, count: int = 3) -> list[Card]:
        """Get up to `count` top waste cards, bottom to top."""
        if count <= 0:
            return []
        return list(self.waste[-count:])

    def all_cards(self) -> list[Card]:
        """Get every card in every pile."""
        cards = list(self.stock) + list(self.waste)
        for pile in self.foundations:
            cards.extend(pile)
        for pile in self.tableaus:
            cards.extend(pile)
        return cards

    def card_count(self) -> int:
        """Total number of cards across all piles."""
        return len(self.all_cards())

    def is_won(self) -> bool:
        """Check if every foundation has been built up to King."""
        return all(
            len(pile) == len(Rank) and pile[-1].rank == Rank.KING
            for pile in self.foundations
        )

    def is_complete_deck(self) -> bool:
        """Check that each of the 52 cards appears exactly once."""
        keys = [card.key for card in self.all_cards()]
        return len(keys) == DECK_SIZE and len(set(keys)) == DECK_SIZE

    def __str__(self) -> str:
        filled = sum(len(pile) for pile in self.foundations)
        return (
            f"Stock {len(self.stock)}, Waste {len(self.waste)}, "
            f"Foundations {filled}/{DECK_SIZE}"
        )
