"""Arithmetic expressions.

`evaluate` suspends once per operand, so an activation may suspend any
number of times.
"""
import attr
from functools import reduce
from typing import List
from stack_safe import recurse

__all__ = ['Num', 'Add', 'Mul', 'evaluate_recursive', 'evaluate', 'nested_sum',
           'product']


# repr and eq would recurse through the tree
@attr.s(repr=False, eq=False)
class Num:
    value = attr.ib()  # type: float


@attr.s(repr=False, eq=False)
class Add:
    exps = attr.ib()  # type: List


@attr.s(repr=False, eq=False)
class Mul:
    lhs = attr.ib()
    rhs = attr.ib()


def evaluate_recursive(exp) -> float:
    if isinstance(exp, Num):
        return exp.value
    if isinstance(exp, Add):
        return sum(evaluate_recursive(each) for each in exp.exps)
    if isinstance(exp, Mul):
        return evaluate_recursive(exp.lhs) * evaluate_recursive(exp.rhs)
    raise TypeError('not an expression: {!r}'.format(exp))


@recurse
def evaluate(exp):
    if isinstance(exp, Num):
        return exp.value
    if isinstance(exp, Add):
        total = 0
        for each in exp.exps:
            total += yield each
        return total
    if isinstance(exp, Mul):
        lhs = yield exp.lhs
        rhs = yield exp.rhs
        return lhs * rhs
    raise TypeError('not an expression: {!r}'.format(exp))


def nested_sum(depth: int):
    """1 + (1 + (... + 1)), `depth` ones.
    """
    if depth < 1:
        raise ValueError("Depth should >= 1")
    result = Num(1)
    for _ in range(depth - 1):
        result = Add([Num(1), result])
    return result


def product(*exps):
    """Left-nested product of `exps`.
    """
    return reduce(Mul, exps)
