"""One-at-a-time run scheduling for the viewer."""


class RunQueue:
    """
    Tracks the request being processed and at most one waiting request.
    
    Submitting while busy replaces whatever was waiting, so the newest
    request is the one that runs next.
    """
    
    def __init__(self):
        self.running = None
        self.pending = None
    
    @property
    def busy(self) -> bool:
        return self.running is not None
    
    def submit(self, request) -> bool:
        """Returns True when the request should start now."""
        if self.busy:
            self.pending = request
            return False
        self.running = request
        return True
    
    def finish(self):
        """Mark the current run done and return the next request to start, if any."""
        self.running, self.pending = self.pending, None
        return self.running
    
    def latest(self, fallback=None):
        """Most recently requested input: waiting, else running, else fallback."""
        if self.pending is not None:
            return self.pending
        if self.running is not None:
            return self.running
        return fallback
