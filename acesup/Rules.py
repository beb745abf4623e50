"""
Legality checks and terminal-state detection. Nothing here mutates the
tableau or the deck.
"""
from dataclasses import dataclass

from acesup.Card import Card, Deck
from acesup.Tableau import Tableau

REMOVE = "REMOVE"
MOVE = "MOVE"
DEAL = "DEAL"


@dataclass(frozen=True)
class Hint:
    """A suggested legal action."""

    kind: str
    stack: int = -1
    toStack: int = -1

    def to_notation(self) -> str:
        if self.kind == DEAL:
            return "DEAL"
        if self.kind == REMOVE:
            return f"REMOVE(S{self.stack})"
        return f"MOVE(S{self.stack}->S{self.toStack})"


def canRemove(tableau: Tableau, card: Card, stackIndex: int) -> bool:
    if card is None or card.isAce():
        return False
    for j, top in enumerate(tableau.tops()):
        if j == stackIndex or top is None:
            continue
        if top.suit == card.suit and top.value > card.value:
            return True
    return False


def canMove(tableau: Tableau, card: Card, fromStack: int, toStack: int) -> bool:
    if card is None or fromStack == toStack:
        return False
    if tableau.peekTop(fromStack) is not card:
        return False
    return tableau.isEmpty(toStack)


def removableStacks(tableau: Tableau):
    return [i for i, top in enumerate(tableau.tops()) if top is not None and canRemove(tableau, top, i)]


def legalMoves(tableau: Tableau):
    moves = []
    tops = tableau.tops()
    for i, top in enumerate(tops):
        if top is None:
            continue
        for j in range(len(tops)):
            if canMove(tableau, top, i, j):
                moves.append((i, j))
    return moves


def checkWin(tableau: Tableau, deck: Deck) -> bool:
    if not deck.isEmpty():
        return False
    cards = tableau.allCards()
    return len(cards) == 4 and all(card.isAce() for card in cards)


def checkLoss(tableau: Tableau, deck: Deck) -> bool:
    if not deck.isEmpty():
        return False
    if removableStacks(tableau):
        return False
    return len(legalMoves(tableau)) == 0


def findHint(tableau: Tableau, deck: Deck):
    removable = removableStacks(tableau)
    if removable:
        return Hint(REMOVE, stack=removable[0])
    moves = legalMoves(tableau)
    if moves:
        (i, j) = moves[0]
        return Hint(MOVE, stack=i, toStack=j)
    if not deck.isEmpty():
        return Hint(DEAL)
    return None
