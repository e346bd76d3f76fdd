"""The Ackermann function, six ways.

`recursive` hits the interpreter's recursion limit for modest inputs, e.g.
A(3, 7); every other implementation keeps its stack on the heap.
"""
from enum import Enum
from stack_safe import (recurse, recurse_tco, Call, StateMachine, Suspended,
                        Completed)

__all__ = [
    'recursive', 'loop', 'yielding', 'yielding_tco', 'manual', 'manual_tco',
    'IMPLEMENTATIONS'
]


def recursive(m: int, n: int) -> int:
    if m == 0:
        return n + 1
    if n == 0:
        return recursive(m - 1, 1)
    return recursive(m - 1, recursive(m, n - 1))


def loop(m: int, n: int) -> int:
    # stack holds the first arguments of the pending outer calls
    stack = []
    while not (m == 0 and not stack):
        if m == 0:
            m = stack.pop()
            n += 1
        elif n == 0:
            m -= 1
            n = 1
        else:
            stack.append(m - 1)
            n -= 1
    return n + 1


@recurse
def _ackermann(mn):
    m, n = mn
    if m == 0:
        return n + 1
    if n == 0:
        return (yield m - 1, 1)
    k = yield m, n - 1
    return (yield m - 1, k)


def yielding(m: int, n: int) -> int:
    return _ackermann((m, n))


@recurse_tco
def _ackermann_tco(mn):
    m, n = mn
    if m == 0:
        return n + 1
    if n == 0:
        yield Call.tail_call((m - 1, 1))
    else:
        k = yield Call.normal((m, n - 1))
        yield Call.tail_call((m - 1, k))


def yielding_tco(m: int, n: int) -> int:
    return _ackermann_tco((m, n))


class Tag(Enum):
    START = 'start'
    # waiting on k = A(m, n - 1)
    INNER = 'inner'
    # waiting on a call whose result is also ours
    OUTER = 'outer'


class AckermannFrame(StateMachine):
    """`_ackermann` compiled by hand.
    """

    def __init__(self, mn):
        self.m, self.n = mn
        self.tag = Tag.START

    def step(self, value):
        if self.tag is Tag.START:
            m, n = self.m, self.n
            if m == 0:
                return Completed(n + 1)
            if n == 0:
                self.tag = Tag.OUTER
                return Suspended((m - 1, 1))
            self.tag = Tag.INNER
            return Suspended((m, n - 1))
        if self.tag is Tag.INNER:
            self.tag = Tag.OUTER
            return Suspended((self.m - 1, value))
        return Completed(value)


class AckermannTailFrame(StateMachine):
    """`_ackermann_tco` compiled by hand; no OUTER state is needed since
    the outer calls are tail calls.
    """

    def __init__(self, mn):
        self.m, self.n = mn
        self.tag = Tag.START

    def step(self, value):
        if self.tag is Tag.START:
            m, n = self.m, self.n
            if m == 0:
                return Completed(n + 1)
            if n == 0:
                return Suspended(Call.tail_call((m - 1, 1)))
            self.tag = Tag.INNER
            return Suspended(Call.normal((m, n - 1)))
        return Suspended(Call.tail_call((self.m - 1, value)))


_manual = recurse(AckermannFrame)
_manual_tco = recurse_tco(AckermannTailFrame)


def manual(m: int, n: int) -> int:
    return _manual((m, n))


def manual_tco(m: int, n: int) -> int:
    return _manual_tco((m, n))


IMPLEMENTATIONS = {
    'recursive': recursive,
    'loop': loop,
    'yield': yielding,
    'yield-tco': yielding_tco,
    'manual': manual,
    'manual-tco': manual_tco,
}
