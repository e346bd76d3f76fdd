"""Frames: single activations of a function body that can be suspended.

A frame body is written like the recursive function it replaces, except
that every recursive call `f(x)` becomes `(yield x)`:

    def triangular(n):
        if n == 0:
            return 0
        return n + (yield n - 1)

Calling the body with an argument gives a frame: a generator that has not
run any of its code yet. Each `yield` is a suspension, each `return` a
completion.

Where a generator function does not fit, a frame can be written by hand as
a `StateMachine`.
"""
import inspect
from collections.abc import Generator
from types import GeneratorType
from typing import Any, Callable, Union
from stack_safe.errors import UsageError
from stack_safe.signals import Suspended, Completed

__all__ = ['start', 'resume', 'is_finished', 'StateMachine', 'Signal']

Signal = Union[Suspended, Completed]

# what a generator raises in place of a StopIteration leaking out of its body
LEAKED_STOP = 'generator raised StopIteration'


def _name_of(body) -> str:
    return getattr(body, '__qualname__', None) or repr(body)


def start(body: Callable[[Any], Generator], argument) -> Generator:
    frame = body(argument)
    if not isinstance(frame, Generator):
        raise UsageError(
            '{} returned {!r} instead of a frame; a frame body must be a '
            'generator function or build a StateMachine'.format(
                _name_of(body), frame))
    return frame


def is_finished(frame: Generator) -> bool:
    """Only frames whose state is observable can answer `True`.
    """
    if isinstance(frame, GeneratorType):
        return inspect.getgeneratorstate(frame) == inspect.GEN_CLOSED
    if isinstance(frame, StateMachine):
        return frame.finished
    return False


def resume(frame: Generator, value=None) -> Signal:
    """Run `frame` up to its next suspension or its completion.

    `value` is the result of the recursive call the frame is waiting on,
    `None` for the first resumption.
    """
    if is_finished(frame):
        raise UsageError('{!r} resumed after it completed'.format(frame))
    try:
        return Suspended(frame.send(value))
    except StopIteration as e:
        return Completed(e.value)


class StateMachine(Generator):
    """A hand-written frame.

    Subclasses keep a tag for "which suspension comes next" plus the locals
    live across suspensions, and implement `step`, which dispatches on the
    tag and returns `Suspended` or `Completed`. The class speaks the
    generator protocol, so the driver cannot tell it from a generator; like
    a generator, a `StopIteration` escaping `step` becomes a `RuntimeError`.

    `release` runs exactly once, when the machine completes, fails or is
    closed.
    """
    finished = False

    def step(self, value) -> Signal:
        raise NotImplementedError

    def release(self):
        pass

    def _finish(self):
        if not self.finished:
            self.finished = True
            self.release()

    def send(self, value):
        if self.finished:
            raise UsageError('{!r} resumed after it completed'.format(self))
        try:
            signal = self.step(value)
        except StopIteration as e:
            self._finish()
            raise RuntimeError(LEAKED_STOP) from e
        except BaseException:
            self._finish()
            raise
        if isinstance(signal, Suspended):
            return signal.argument
        self._finish()
        if isinstance(signal, Completed):
            raise StopIteration(signal.result)
        raise UsageError(
            '{}.step returned {!r}, expected Suspended or Completed'.format(
                type(self).__name__, signal))

    def throw(self, typ, val=None, tb=None):
        self._finish()
        if val is None:
            if tb is None:
                raise typ
            val = typ()
        if tb is not None:
            val = val.with_traceback(tb)
        raise val
