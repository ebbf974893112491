"""Command line calculator for fractions

Usage examples:

    rational-calc show -- -7/2
    rational-calc calc 1/2 1/3 1/4
    rational-calc -e cross compare 1/2 2/4
    rational-calc eval '1/2 + 1/3 * 3'
    rational-calc sum 2 3/5 2.3
    rational-calc power 2 10

The log level comes from `RATIONAL_LOG_LEVEL` (default WARNING) unless
`--verbose` is given.

"""

import logging
import math
import os
import sys

import plac

from .equality import compare as compare_fractions
from .equality import cross_multiply_equals, structural_equals
from .errors import RationalError
from .expression import evaluate, rewrite, sum_values
from .fraction import rational_type
from .parser import parse


def power(x, y):
    """Raise `x` to the power `y` in floating point"""
    return math.pow(x, y)

def show(cls, a):
    """Every coercion of one fraction"""
    r = parse(a, cls)
    return [
        f'text: {r.to_text()}',
        f'int: {r.to_int()}',
        f'long: {r.to_long()}',
        f'float: {r.to_float()}',
        f'double: {r.to_double()}',
    ]

def calc(cls, a, b, c):
    """The four operations on `a` and `b`, then `(a + b) / c - 5`

    >>> cls = rational_type()
    >>> a, b, c = '1/2', '1/3', '1/4'

    """
    f1, f2, f3 = [parse(s, cls) for s in (a, b, c)]
    return [
        f'{f1} * {f2} = {f1.multiply(f2)}',
        f'{f1} + {f2} = {f1.add(f2)}',
        f'{f1} / {f2} = {f1.divide(f2)}',
        f'{f1} - {f2} = {f1.subtract(f2)}',
        f'({f1} + {f2}) / {f3} - 5 = {f1.add(f2).divide(f3).subtract_int(5)}',
    ]

def compare(cls, a, b):
    """Both equality policies and the hashes of `a` and `b`"""
    f1, f2 = parse(a, cls), parse(b, cls)
    return [
        f'structural: {structural_equals(f1, f2)}',
        f'cross: {cross_multiply_equals(f1, f2)}',
        f'order: {compare_fractions(f1, f2)}',
        f'hash({f1}): {hash(f1)}',
        f'hash({f2}): {hash(f2)}',
    ]

def evaluate_source(cls, source):
    logging.debug(f'Rewritten: {rewrite(source)}')
    return [evaluate(source, cls).to_text()]

def parse_number(cls, text):
    """Read `text` as a fraction, an integer or a float"""
    if '/' in text:
        return parse(text, cls)
    try:
        return int(text)
    except ValueError:
        return float(text)

def add_values(cls, *values):
    return [str(sum_values([parse_number(cls, value) for value in values]))]

def power_values(cls, x, y):
    return [str(power(int(x), int(y)))]

COMMANDS = {
    'show': (show, 1),
    'calc': (calc, 3),
    'compare': (compare, 2),
    'eval': (evaluate_source, 1),
    'sum': (add_values, None),
    'power': (power_values, 2),
}

def log_level(verbose):
    """Level from `--verbose` or `RATIONAL_LOG_LEVEL`, WARNING for unknown names"""
    if verbose:
        return logging.DEBUG
    level = logging.getLevelName(os.environ.get('RATIONAL_LOG_LEVEL', 'WARNING').upper())
    return level if isinstance(level, int) else logging.WARNING


@plac.annotations(
        command=(f'one of {", ".join(COMMANDS)}', 'positional', None, str, list(COMMANDS)),
        equality=('equality policy: structural or cross', 'option', 'e', str),
        bits=('integer width: 32 or 64', 'option', 'b', int),
        verbose=('log at debug level', 'flag', 'v'),
        operands=('fractions, numbers or an expression', 'positional'),
)
def main(command, equality='structural', bits=32, verbose=False, *operands):
    """Run `command` on `operands` and print one result per line

    Returns:
        lines (list): what was printed

    Exits with status 1 on an arithmetic or parse error and with status 2 on a
    wrong number of operands.

    """
    logging.basicConfig(level=log_level(verbose))
    func, arity = COMMANDS[command]
    if arity is not None and len(operands) != arity:
        logging.error(f'{command} takes {arity} operand(s), got {len(operands)}')
        sys.exit(2)

    try:
        cls = rational_type(equality, bits)
        lines = func(cls, *operands)
    except (RationalError, ValueError, OverflowError) as e:
        logging.error(f'{command}: {e}')
        sys.exit(1)

    for line in lines:
        print(line)
    return lines


if __name__ == '__main__':
    plac.call(main)
