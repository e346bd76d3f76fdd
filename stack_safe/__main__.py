import argparse
import sys
from stack_safe.examples.ackermann import IMPLEMENTATIONS


def non_negative(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError('expected integer, got {!r}'.format(text))
    if value < 0:
        raise argparse.ArgumentTypeError('expected a non-negative integer, got {}'.format(value))
    return value


def main(argv=None):
    parser = argparse.ArgumentParser(prog='stack_safe', description="Computes the Ackermann function")
    parser.add_argument("impl", metavar="IMPL", choices=list(IMPLEMENTATIONS), help="implementation to use: %(choices)s")
    parser.add_argument("m", metavar="M", type=non_negative, help="integer to pass as first argument")
    parser.add_argument("n", metavar="N", type=non_negative, help="integer to pass as second argument")
    args = parser.parse_args(argv)

    implementation = IMPLEMENTATIONS[args.impl]
    try:
        result = implementation(args.m, args.n)
    except RecursionError as e:
        print("{}: {}".format(args.impl, e), file=sys.stderr)
        return 1
    print(result)
    return 0


if __name__ == '__main__':
    sys.exit(main())
