"""Exceptions raised by the trampoline itself.

Errors raised inside a frame body are never wrapped; they leave the
driver exactly as the body raised them.
"""

__all__ = [
    'TrampolineError', 'UsageError', 'DepthLimitExceeded', 'Cancelled',
    'FrameAllocationError'
]


class TrampolineError(Exception):
    pass


class UsageError(TrampolineError):
    """A frame was used against its contract: resumed after completion,
    produced by something that is not a generator, or yielded a value the
    driver cannot interpret.
    """


class DepthLimitExceeded(TrampolineError, RecursionError):
    def __init__(self, depth: int, limit: int):
        TrampolineError.__init__(
            self, 'stack depth {} exceeds the limit {}'.format(depth, limit))
        self.depth = depth
        self.limit = limit


class Cancelled(TrampolineError):
    def __init__(self, depth: int):
        TrampolineError.__init__(
            self, 'cancelled at stack depth {}'.format(depth))
        self.depth = depth


class FrameAllocationError(TrampolineError, MemoryError):
    def __init__(self, depth: int):
        TrampolineError.__init__(
            self, 'cannot allocate a frame at stack depth {}'.format(depth))
        self.depth = depth
