class AceUpError(AssertionError):
    """
    Base class for broken engine contracts. These are programming errors,
    not rule rejections: a rejected move returns False instead.
    """
    pass


class InvalidStack(AceUpError):
    def __init__(self, stackIndex):
        super().__init__(f"stack index out of range: {stackIndex!r}")
        self.stackIndex = stackIndex


class EmptyStack(AceUpError):
    def __init__(self, stackIndex):
        super().__init__(f"stack {stackIndex} is empty")
        self.stackIndex = stackIndex


class HistoryCorruption(AceUpError):
    pass


class InvalidPosition(AceUpError):
    pass
