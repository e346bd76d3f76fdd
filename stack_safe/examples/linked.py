import attr
from typing import Optional
from stack_safe import recurse


@attr.s(slots=True, repr=False, eq=False)
class Cons:
    head = attr.ib()
    tail = attr.ib()  # type: Optional[Cons]


def from_range(n: int) -> Optional[Cons]:
    xs = None
    for i in reversed(range(n)):
        xs = Cons(i, xs)
    return xs


def length(xs: Optional[Cons]) -> int:
    if xs is None:
        return 0
    return 1 + length(xs.tail)


@recurse
def length_safe(xs: Optional[Cons]):
    if xs is None:
        return 0
    tail_length = yield xs.tail
    return 1 + tail_length
