import logging
import time

from acesup.Card import RANKS, SUITS, Deck, standardCards
from acesup.Errors import HistoryCorruption, InvalidPosition
from acesup.HintTimer import HintTimer
from acesup.History import CallDeal, CardMove, HistoryRecorder, RemoveCard
from acesup.Interface import Interface
from acesup.Rules import canMove, canRemove, checkLoss, checkWin, findHint
from acesup.Tableau import STACK_COUNT, Tableau

logger = logging.getLogger(__name__)

PLAYING = "playing"
WON = "won"
LOST = "lost"


class GameConfig:
    def __init__(self, seed=None, hintSeconds=3.0):
        self.seed = seed
        self.hintSeconds = hintSeconds

    def __repr__(self):
        return f"GameConfig(seed={self.seed!r}, hintSeconds={self.hintSeconds!r})"


def validateCardSet(cards):
    """
    Raises InvalidPosition unless ``cards`` is exactly one standard deck,
    each card present once as a distinct object.
    """
    if len({id(card) for card in cards}) != len(cards):
        raise InvalidPosition("the same card object appears twice")
    ids = sorted(card.id for card in cards)
    if ids != list(range(len(SUITS) * len(RANKS))):
        raise InvalidPosition(f"expected the 52 standard cards, got {len(cards)} cards")


class Core:
    """
    Public actions (deal, attempt***, on***Activated, undo, redo, showHint)
    return False on a rule rejection and never raise for one.
    do*** : forward mutation, no checks.
    undo*** / redo*** : replay of a history entry, verified against its record.
    """
    DEFAULT_CONFIG = GameConfig()

    def __init__(self, clock=time.monotonic, hintTimer=None):
        self.interface = Interface()
        self.interface.core = self
        self.clock = clock
        self.hintTimer = hintTimer if hintTimer is not None else HintTimer(clock)
        self.config = Core.DEFAULT_CONFIG

        self.deck: Deck = None
        self.tableau: Tableau = None
        self.discards = []  # removed cards, most recent last
        self.history: HistoryRecorder = None

        self.selection = None  # (card, stackIndex)
        self.hint = None
        self.moveCount = 0
        self.started = False
        self.won = False
        self.lost = False
        self.startTime = None
        self.endTime = None

    def registerInterface(self, interface):
        self.interface = interface
        interface.core = self

    def __resetState(self):
        self.hintTimer.cancel()
        self.history = HistoryRecorder(self)
        self.selection = None
        self.hint = None
        self.moveCount = 0
        self.started = False
        self.won = False
        self.lost = False
        self.startTime = None
        self.endTime = None

    def newGame(self, config: GameConfig = None):
        if config is not None:
            self.config = config
        self.__resetState()
        self.deck = Deck.shuffled(self.config.seed)
        self.tableau = Tableau()
        self.discards = []
        for i in range(STACK_COUNT):
            card = self.deck.draw()
            card.faceUp = True
            self.tableau.push(i, card)
        logger.info("New game started (seed=%s)", self.config.seed)
        self.interface.onStart()

    def loadPosition(self, stacks, deck=(), discards=None):
        """
        Installs an arbitrary position. ``stacks`` lists each pile bottom to
        top, ``deck`` lists the undealt cards with the next card to draw last.
        When ``discards`` is omitted every card not on the table or in the deck
        counts as already discarded.
        """
        stacks = [list(stack) for stack in stacks]
        if len(stacks) != STACK_COUNT:
            raise InvalidPosition(f"expected {STACK_COUNT} stacks, got {len(stacks)}")
        deck = list(deck)
        inPlay = deck + [card for stack in stacks for card in stack]
        if discards is None:
            usedIds = {card.id for card in inPlay}
            discards = [card for card in standardCards() if card.id not in usedIds]
        discards = list(discards)
        validateCardSet(inPlay + discards)

        self.__resetState()
        self.deck = Deck(deck)
        self.discards = discards
        for card in self.discards:
            card.faceUp = True
        self.tableau = Tableau()
        for i, stack in enumerate(stacks):
            for card in stack:
                card.faceUp = True
                self.tableau.push(i, card)
        logger.info("Position loaded (%d cards in deck)", self.deck.size())
        self.interface.onStart()

    # ---- state queries ----

    @property
    def status(self):
        if self.won:
            return WON
        if self.lost:
            return LOST
        return PLAYING

    def isTerminal(self):
        return self.won or self.lost

    def elapsed(self):
        if self.startTime is None:
            return 0.0
        end = self.endTime if self.endTime is not None else self.clock()
        return max(0.0, end - self.startTime)

    def allCards(self):
        return list(self.deck) + [card for stack in self.tableau.stacks for card in stack] + self.discards

    def canUndo(self):
        return self.history.canUndo()

    def canRedo(self):
        return not self.isTerminal() and self.history.canRedo()

    # ---- helpers ----

    def __markStarted(self):
        if not self.started:
            self.started = True
            self.startTime = self.clock()

    def __beforeMutation(self):
        self.hintTimer.cancel()
        self.hint = None

    def __updateTerminal(self):
        """Re-derives won/lost; returns WON or LOST on a fresh transition."""
        wasWon, wasLost = self.won, self.lost
        self.won = checkWin(self.tableau, self.deck)
        self.lost = (not self.won) and checkLoss(self.tableau, self.deck)
        if self.won or self.lost:
            if self.endTime is None:
                self.endTime = self.clock()
        else:
            self.endTime = None
        if self.won and not wasWon:
            return WON
        if self.lost and not wasLost:
            return LOST
        return None

    def __publish(self, event, undone=False):
        # status is settled before the view takes its snapshot
        transition = self.__updateTerminal()
        if undone:
            self.interface.onUndoEvent(event)
        else:
            self.interface.onEvent(event)
        if transition == WON:
            logger.info("Game won in %d moves", self.moveCount)
            self.interface.onWin()
        elif transition == LOST:
            logger.info("Game lost after %d moves", self.moveCount)
            self.interface.onLoss()

    # ---- player actions ----

    def deal(self):
        if self.isTerminal():
            logger.debug("Deal rejected: game is over")
            return False
        if self.deck.isEmpty():
            logger.debug("Deal rejected: deck is empty")
            return False
        self.__beforeMutation()
        cards = self.doDeal(STACK_COUNT)
        event = CallDeal(cards)
        self.history.log(event)
        self.moveCount += 1
        self.selection = None
        self.__markStarted()
        logger.debug("Dealt %s", event)
        self.__publish(event)
        return True

    def attemptRemove(self, stackIndex):
        if self.isTerminal():
            return False
        card = self.tableau.peekTop(stackIndex)
        if card is None or card.isAce() or not canRemove(self.tableau, card, stackIndex):
            logger.debug("Remove rejected on stack %d", stackIndex)
            return False
        self.__beforeMutation()
        self.discards.append(self.tableau.popTop(stackIndex))
        event = RemoveCard(card, stackIndex)
        self.history.log(event)
        self.moveCount += 1
        self.selection = None
        self.__markStarted()
        logger.debug("Removed %s", event)
        self.__publish(event)
        return True

    def attemptMove(self, fromStack, toStack):
        if self.isTerminal():
            return False
        card = self.tableau.peekTop(fromStack)
        if not canMove(self.tableau, card, fromStack, toStack):
            logger.debug("Move rejected from stack %d to %d", fromStack, toStack)
            return False
        self.__beforeMutation()
        self.doMove(fromStack, toStack)
        event = CardMove(card, fromStack, toStack)
        self.history.log(event)
        self.moveCount += 1
        self.selection = None
        self.__markStarted()
        logger.debug("Moved %s", event)
        self.__publish(event)
        return True

    def onCardActivated(self, stackIndex):
        if self.isTerminal():
            return False
        card = self.tableau.peekTop(stackIndex)
        if card is None:
            return False
        if self.selection is not None and self.selection[0] is card:
            self.selection = None
            self.interface.notifyRedraw()
            return True
        if self.attemptRemove(stackIndex):
            return True
        self.selection = (card, stackIndex)
        self.__markStarted()
        self.interface.notifyRedraw()
        return True

    def onEmptyStackActivated(self, stackIndex):
        if self.isTerminal() or self.selection is None:
            return False
        if not self.tableau.isEmpty(stackIndex):
            return False
        (_, fromStack) = self.selection
        # a failed move keeps the selection so the player can retry
        return self.attemptMove(fromStack, stackIndex)

    def undo(self):
        if not self.history.canUndo():
            logger.debug("Undo rejected: nothing to undo")
            return False
        self.__beforeMutation()
        event = self.history.undo()
        self.moveCount = max(0, self.moveCount - 1)
        self.selection = None
        logger.debug("Undid %s", event)
        self.__publish(event, undone=True)
        return True

    def redo(self):
        if not self.canRedo():
            logger.debug("Redo rejected")
            return False
        self.__beforeMutation()
        event = self.history.redo()
        self.moveCount += 1
        self.selection = None
        logger.debug("Redid %s", event)
        self.__publish(event)
        return True

    def showHint(self):
        if self.isTerminal():
            return None
        self.hintTimer.cancel()
        self.hint = findHint(self.tableau, self.deck)
        if self.hint is not None:
            self.hintTimer.schedule(self.config.hintSeconds, self.clearHint)
        self.interface.notifyRedraw()
        return self.hint

    def clearHint(self):
        self.hintTimer.cancel()
        if self.hint is None:
            return False
        self.hint = None
        self.interface.notifyRedraw()
        return True

    def pollTimers(self):
        return self.hintTimer.poll()

    # ---- forward mutations ----

    def doDeal(self, count):
        cards = []
        for i in range(min(count, STACK_COUNT)):
            card = self.deck.draw()
            if card is None:
                break
            card.faceUp = True
            self.tableau.push(i, card)
            cards.append(card)
        return cards

    def doMove(self, fromStack, toStack):
        card = self.tableau.popTop(fromStack)
        self.tableau.push(toStack, card)
        return card

    # ---- history replay ----

    def undoDeal(self, event: CallDeal):
        for i in reversed(range(event.drawCount)):
            if self.tableau.peekTop(i) is not event.cards[i]:
                raise HistoryCorruption(f"stack {i} does not end with {event.cards[i]} from {event}")
            self.deck.returnToTop(self.tableau.popTop(i))

    def redoDeal(self, event: CallDeal):
        for k, card in enumerate(event.cards):
            if self.deck.peek(k) is not card:
                raise HistoryCorruption(f"deck does not reproduce {event}")
        self.doDeal(event.drawCount)

    def undoRemove(self, event: RemoveCard):
        if not self.discards or self.discards[-1] is not event.card:
            raise HistoryCorruption(f"{event.card} is not the last discarded card")
        self.tableau.push(event.fromStack, self.discards.pop())

    def redoRemove(self, event: RemoveCard):
        if self.tableau.peekTop(event.fromStack) is not event.card:
            raise HistoryCorruption(f"stack {event.fromStack} does not end with {event.card}")
        self.discards.append(self.tableau.popTop(event.fromStack))

    def undoMove(self, event: CardMove):
        if self.tableau.peekTop(event.toStack) is not event.card:
            raise HistoryCorruption(f"stack {event.toStack} does not end with {event.card}")
        self.doMove(event.toStack, event.fromStack)

    def redoMove(self, event: CardMove):
        if self.tableau.peekTop(event.fromStack) is not event.card or not self.tableau.isEmpty(event.toStack):
            raise HistoryCorruption(f"cannot replay {event}")
        self.doMove(event.fromStack, event.toStack)
