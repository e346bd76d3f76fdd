"""Stack safety for recursive functions, for free.

Write the recursive function as a generator whose recursive calls are
`yield`s, wrap it with `recurse`, and it runs on a heap-allocated stack:

    from stack_safe import recurse

    @recurse
    def triangular(n):
        if n == 0:
            return 0
        return n + (yield n - 1)

    assert triangular(1_000_000) == 500000500000

**If you only want to use the library, `recurse` is all you need.**

------------------

- `recurse_tco`: frames yield `Call.normal(x)` or `Call.tail_call(x)`;
  tail calls do not grow the stack.

- `recurse_with_state`: an explicit state value is threaded through every
  call and return.

- `StateMachine`: write a frame by hand where a generator does not fit.

- `Limits`: cap the stack depth or make a run cancellable.
"""
from stack_safe.config import Limits, DEFAULT_LIMITS
from stack_safe.errors import (TrampolineError, UsageError,
                               DepthLimitExceeded, Cancelled,
                               FrameAllocationError)
from stack_safe.frame import start, resume, is_finished, StateMachine
from stack_safe.signals import Suspended, Completed, Call
from stack_safe.trampoline import recurse, recurse_tco, recurse_with_state

__all__ = [
    'recurse',
    'recurse_tco',
    'recurse_with_state',
    'start',
    'resume',
    'is_finished',
    'StateMachine',
    'Suspended',
    'Completed',
    'Call',
    'Limits',
    'DEFAULT_LIMITS',
    'TrampolineError',
    'UsageError',
    'DepthLimitExceeded',
    'Cancelled',
    'FrameAllocationError',
]
