"""Binomial coefficients by Pascal's rule.

Two recursive calls per activation; the pair `(n, k)` is the argument.
"""
from stack_safe import recurse


def binomial(n: int, k: int) -> int:
    if k == 0 or k == n:
        return 1
    return binomial(n - 1, k - 1) + binomial(n - 1, k)


@recurse
def _binomial(nk):
    n, k = nk
    if k == 0 or k == n:
        return 1
    return (yield n - 1, k - 1) + (yield n - 1, k)


def binomial_safe(n: int, k: int) -> int:
    return _binomial((n, k))
