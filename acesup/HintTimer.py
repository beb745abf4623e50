import time


class HintTimer:
    """
    A single pending deferred callback. Scheduling a new one replaces the
    old one. Nothing runs on its own: the owning loop calls ``poll()`` so the
    callback fires on the control thread.
    """

    def __init__(self, clock=time.monotonic):
        self.clock = clock
        self.deadline = None
        self.callback = None

    def schedule(self, delay, callback):
        self.deadline = self.clock() + max(0.0, float(delay))
        self.callback = callback

    def cancel(self):
        self.deadline = None
        self.callback = None

    def pending(self):
        return self.callback is not None

    def poll(self):
        if self.callback is None or self.clock() < self.deadline:
            return False
        callback = self.callback
        self.cancel()
        callback()
        return True
