from stack_safe import recurse


def triangular(n: int) -> int:
    if n == 0:
        return 0
    return n + triangular(n - 1)


@recurse
def triangular_safe(n: int):
    if n == 0:
        return 0
    return n + (yield n - 1)
