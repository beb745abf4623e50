from acesup.History import GameEvent


class Interface:
    """
    Passive view notified by the Core. Views read state, never mutate it.
    """

    def __init__(self):
        self.core = None

    def onStart(self):
        self.notifyRedraw()

    def onEvent(self, event: GameEvent):
        """
        Invoked when a game event is performed or redone.
        """
        self.notifyRedraw()

    def onUndoEvent(self, event: GameEvent):
        """
        Invoked when a game event is undone.
        """
        self.notifyRedraw()

    def notifyRedraw(self):
        pass

    def onWin(self):
        pass

    def onLoss(self):
        pass
