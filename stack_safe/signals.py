"""What a frame hands back to the driver after one resumption.
"""
import attr

__all__ = ['Suspended', 'Completed', 'Call']


@attr.s(slots=True, frozen=True)
class Suspended:
    """The frame waits for the result of calling the function on `argument`.
    """
    argument = attr.ib()


@attr.s(slots=True, frozen=True)
class Completed:
    """The frame returned; `result` is final for that frame.
    """
    result = attr.ib()


@attr.s(slots=True, frozen=True)
class Call:
    """A suspension for `recurse_tco`.

    A tail call hands the frame's own continuation over to the callee:
    the suspending frame is dropped and the callee's result goes straight
    to the frame's caller.
    """
    argument = attr.ib()
    tail = attr.ib(default=False)  # type: bool

    @classmethod
    def normal(cls, argument):
        return cls(argument, False)

    @classmethod
    def tail_call(cls, argument):
        return cls(argument, True)
