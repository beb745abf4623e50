import random

SUITS = ("H", "S", "C", "D")
RANKS = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")
FACE_VALUES = {"J": 11, "Q": 12, "K": 13, "A": 14}
RED_SUITS = ("H", "D")


class Card:
    """
    A single physical card. Suit and rank never change after construction,
    only ``faceUp`` does. Equality is identity: two cards with the same face
    are still two different cards.
    """
    NUM_PER_SUIT = 13

    __slots__ = ("suit", "rank", "faceUp", "id")

    def __init__(self, suit, rank, faceUp=False):
        if suit not in SUITS:
            raise ValueError(f"unknown suit: {suit!r}")
        if rank not in RANKS:
            raise ValueError(f"unknown rank: {rank!r}")
        self.suit = suit
        self.rank = rank
        self.faceUp = faceUp
        self.id = SUITS.index(suit) * Card.NUM_PER_SUIT + RANKS.index(rank)

    @property
    def value(self) -> int:
        if self.rank in FACE_VALUES:
            return FACE_VALUES[self.rank]
        return int(self.rank)

    @property
    def color(self) -> str:
        if self.suit in RED_SUITS:
            return "red"
        return "black"

    def isAce(self):
        return self.rank == "A"

    def gameStr(self):
        if not self.faceUp:
            return "---"
        return self.rank + self.suit

    def __str__(self):
        return self.rank + self.suit

    def __repr__(self):
        state = "up" if self.faceUp else "down"
        return f"Card({self.rank}{self.suit}, {state})"

    @staticmethod
    def fromId(id, faceUp=False):
        return Card(SUITS[id // Card.NUM_PER_SUIT], RANKS[id % Card.NUM_PER_SUIT], faceUp)


def standardCards():
    return [Card(suit, rank) for suit in SUITS for rank in RANKS]


def parseCard(code: str, faceUp=True):
    code = code.strip().upper()
    if len(code) < 2:
        raise ValueError(f"bad card code: {code!r}")
    return Card(code[-1], code[:-1], faceUp)


def parseCards(codes: str, faceUp=True):
    """Parses a whitespace separated list such as ``"7H 10S AD"``."""
    return [parseCard(code, faceUp) for code in codes.split()]


class Deck:
    """
    The undealt cards. The end of the list is the draw end.
    """

    def __init__(self, cards=None):
        self.cards = list(cards) if cards is not None else []
        for card in self.cards:
            card.faceUp = False

    @staticmethod
    def shuffled(seed=None):
        rng = random.Random(seed)
        cards = standardCards()
        rng.shuffle(cards)
        return Deck(cards)

    def draw(self):
        if len(self.cards) == 0:
            return None
        return self.cards.pop()

    def peek(self, depth=0):
        """Looks ``depth`` cards below the top without drawing."""
        if depth < 0 or depth >= len(self.cards):
            return None
        return self.cards[-1 - depth]

    def isEmpty(self):
        return len(self.cards) == 0

    def size(self):
        return len(self.cards)

    def returnToTop(self, card: Card):
        card.faceUp = False
        self.cards.append(card)

    def __iter__(self):
        return iter(self.cards)
