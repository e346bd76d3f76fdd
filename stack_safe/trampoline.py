"""The driver: runs frames on an explicit, heap-allocated stack.

`recurse(body)` turns a frame body into a function with the calling
contract of the original recursive function. Only the top frame of the
stack ever runs; a suspension pushes a new frame for the yielded argument,
a completion pops the top frame and resumes the one below it with the
result. The native stack stays a constant few frames deep whatever the
recursion depth.
"""
import functools
import logging
from collections.abc import Generator
from typing import Any, Callable, List, Optional
from stack_safe.config import Limits, DEFAULT_LIMITS
from stack_safe.errors import (UsageError, DepthLimitExceeded, Cancelled,
                               FrameAllocationError)
from stack_safe.frame import start, StateMachine, LEAKED_STOP
from stack_safe.signals import Call

__all__ = ['recurse', 'recurse_tco', 'recurse_with_state']

logger = logging.getLogger(__name__)


def _unwind(stack: List[Generator]):
    """Close frames from the top down, as native unwinding would.
    """
    error = None
    while stack:
        frame = stack.pop()
        try:
            frame.close()
        except BaseException as e:
            # the frame's cleanup raised; the last such error wins, the rest is
            # still released
            error = e
    if error is not None:
        raise error


def _leaked_stop(frame: Generator,
                 error: RuntimeError) -> Optional[StopIteration]:
    """The `StopIteration` raised in the body of `frame`, if `error` is the
    `RuntimeError` it was turned into on its way out of that frame.
    """
    cause = error.__cause__
    if (type(error) is not RuntimeError or error.args != (LEAKED_STOP, )
            or not isinstance(cause, StopIteration)):
        return None
    tb = error.__traceback__
    while tb.tb_next is not None:
        tb = tb.tb_next
    if isinstance(frame, _Checked):
        frame = frame.frame
    # the innermost entry is the body itself, or the code resuming it on
    # interpreters that convert the error after the body's frame is gone
    code = tb.tb_frame.f_code
    if code is getattr(frame, 'gi_code', None) or code in _RESUMERS:
        return cause
    return None


def _open(stack: List[Generator], body, argument,
          max_depth: Optional[int]):
    depth = len(stack) + 1
    if max_depth is not None and depth > max_depth:
        raise DepthLimitExceeded(depth, max_depth)
    try:
        stack.append(start(body, argument))
    except MemoryError as e:
        raise FrameAllocationError(depth) from e


def _drive(body, initial, tco: bool, limits: Limits):
    max_depth = limits.max_depth
    cancelled = limits.cancelled
    name = getattr(body, '__qualname__', body)
    debug = logger.isEnabledFor(logging.DEBUG)
    if debug:
        logger.debug('%s(%r): start', name, initial)

    stack = []  # type: List[Generator]
    pop = stack.pop
    value = None
    peak = 1
    steps = 0
    try:
        _open(stack, body, initial, max_depth)
        while True:
            if cancelled is not None and cancelled():
                raise Cancelled(len(stack))
            steps += 1
            try:
                yielded = stack[-1].send(value)
            except StopIteration as e:
                pop()
                if not stack:
                    if debug:
                        logger.debug(
                            '%s: done after %d resumptions, peak depth %d',
                            name, steps, peak)
                    return e.value
                value = e.value
                continue
            except RuntimeError as e:
                stop = _leaked_stop(stack[-1], e)
                if stop is None:
                    raise
                raise stop from None

            if tco:
                if not isinstance(yielded, Call):
                    raise UsageError(
                        'a frame run by recurse_tco yielded {!r}, expected '
                        'a Call'.format(yielded))
                if yielded.tail:
                    pop().close()
                yielded = yielded.argument
            _open(stack, body, yielded, max_depth)
            if len(stack) > peak:
                peak = len(stack)
            value = None
    except BaseException as e:
        if debug:
            logger.debug('%s: unwinding %d frames after %s', name,
                         len(stack), type(e).__name__)
        _unwind(stack)
        raise


def _make_driver(body, tco: bool, limits: Optional[Limits]):
    if limits is None:
        limits = DEFAULT_LIMITS

    @functools.wraps(body, updated=())
    def run(argument):
        return _drive(body, argument, tco, limits)

    run.body = body
    run.limits = limits
    return run


def recurse(body: Callable[[Any], Generator] = None,
            limits: Optional[Limits] = None):
    """Make a stack-safe function out of a frame body.

    `recurse(body)(x)` returns what the original recursive function returns
    for `x` and raises what it raises. Also usable as `@recurse` or
    `@recurse(limits=...)`.
    """
    if body is None:
        return lambda body: _make_driver(body, False, limits)
    return _make_driver(body, False, limits)


def recurse_tco(body: Callable[[Any], Generator] = None,
                limits: Optional[Limits] = None):
    """Like `recurse`, but frames yield `Call`s.

    `yield Call.normal(x)` is an ordinary recursive call. After
    `yield Call.tail_call(x)` the yielding frame is closed and never resumed;
    the result of the call on `x` becomes its result, so a chain of tail
    calls runs at constant stack depth.
    """
    if body is None:
        return lambda body: _make_driver(body, True, limits)
    return _make_driver(body, True, limits)


def _pair(value, what: str):
    if not isinstance(value, tuple) or len(value) != 2:
        raise UsageError('expected {} to be a pair, got {!r}'.format(
            what, value))
    return value


def recurse_with_state(body: Callable[[Any, Any], Generator] = None,
                       limits: Optional[Limits] = None):
    """Thread an explicit state through the recursion.

    Frames are built by `body(argument, state)`, suspend with
    `(yield argument, state)` which evaluates to `(result, state)`, and
    return `(result, state)`. The returned function takes
    `(argument, state)` and returns the final `(result, state)`.
    """
    if body is None:
        return lambda body: recurse_with_state(body, limits)
    if limits is None:
        limits = DEFAULT_LIMITS

    def start_with_state(call):
        argument, state = _pair(call, 'a suspension')
        return _Checked(body(argument, state))

    start_with_state.__qualname__ = getattr(body, '__qualname__', repr(body))

    @functools.wraps(body, updated=())
    def run(argument, state):
        return _drive(start_with_state, (argument, state), False, limits)

    run.body = body
    run.limits = limits
    return run


class _Checked(Generator):
    """Checks that a stateful frame completes with a `(result, state)` pair.
    """
    __slots__ = ('frame', )

    def __init__(self, frame):
        if not isinstance(frame, Generator):
            raise UsageError('{!r} is not a frame'.format(frame))
        self.frame = frame

    def send(self, value):
        try:
            return self.frame.send(value)
        except StopIteration as e:
            raise StopIteration(_pair(e.value, 'a completion'))

    def throw(self, typ, val=None, tb=None):
        if val is None and tb is None:
            return self.frame.throw(typ)
        return self.frame.throw(typ, val, tb)

    def close(self):
        self.frame.close()


_RESUMERS = frozenset(
    [_drive.__code__, _Checked.send.__code__, StateMachine.send.__code__])
