"""Run-time limits for a trampoline.
"""
import attr
from typing import Callable, Optional

__all__ = ['Limits', 'DEFAULT_LIMITS']


def _positive_or_none(_, attribute, value):
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError('{} must be a positive int or None, got {!r}'.format(
            attribute.name, value))


@attr.s(frozen=True)
class Limits:
    # None: the stack grows until the heap is exhausted
    max_depth = attr.ib(
        default=None, validator=_positive_or_none)  # type: Optional[int]
    # polled once per resumption; a true result aborts the run
    cancelled = attr.ib(
        default=None,
        validator=attr.validators.optional(
            attr.validators.is_callable()))  # type: Optional[Callable[[], bool]]

    def evolve(self, **changes) -> 'Limits':
        return attr.evolve(self, **changes)


DEFAULT_LIMITS = Limits()
