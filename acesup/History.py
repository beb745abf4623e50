from acesup.Card import Card


class GameEvent:
    """
    A reversible entry in the move history. Each entry stores everything it
    needs to be inverted, so undo never re-derives it from the current state.
    """

    def perform(self, core):
        pass

    def undo(self, core):
        pass


class CallDeal(GameEvent):
    def __init__(self, cards):
        # cards[i] was dealt onto stack i
        self.cards = tuple(cards)

    @property
    def drawCount(self):
        return len(self.cards)

    def undo(self, core):
        core.undoDeal(self)

    def perform(self, core):
        core.redoDeal(self)

    def __repr__(self):
        return f"CallDeal({' '.join(map(str, self.cards))})"


class RemoveCard(GameEvent):
    def __init__(self, card: Card, fromStack: int):
        self.card = card
        self.fromStack = fromStack

    def undo(self, core):
        core.undoRemove(self)

    def perform(self, core):
        core.redoRemove(self)

    def __repr__(self):
        return f"RemoveCard({self.card}, {self.fromStack})"


class CardMove(GameEvent):
    def __init__(self, card: Card, fromStack: int, toStack: int):
        self.card = card
        self.fromStack = fromStack
        self.toStack = toStack

    def undo(self, core):
        core.undoMove(self)

    def perform(self, core):
        core.redoMove(self)

    def __repr__(self):
        return f"CardMove({self.card}, {self.fromStack}->{self.toStack})"


class HistoryRecorder:
    """
    Linear undo/redo: two LIFO logs. Logging a new forward event discards
    everything that could have been redone.
    """

    def __init__(self, core):
        self.core = core
        self.undoLog = []
        self.redoLog = []

    def log(self, event: GameEvent):
        self.undoLog.append(event)
        self.redoLog.clear()

    def canUndo(self):
        return len(self.undoLog) > 0

    def canRedo(self):
        return len(self.redoLog) > 0

    def undo(self):
        if not self.undoLog:
            return None
        event = self.undoLog.pop()
        event.undo(self.core)
        self.redoLog.append(event)
        return event

    def redo(self):
        if not self.redoLog:
            return None
        event = self.redoLog.pop()
        event.perform(self.core)
        self.undoLog.append(event)
        return event
