from stack_safe.examples.triangular import triangular, triangular_safe

LARGE = 1_000_000

assert triangular_safe(LARGE) == LARGE * (LARGE + 1) // 2
print("`triangular_safe` has not overflowed its stack.")

print("`triangular` will overflow its stack soon...")
RES = None
try:
    triangular(LARGE)
except RecursionError as e:
    RES = e
assert isinstance(RES, RecursionError)
print("DONE")
