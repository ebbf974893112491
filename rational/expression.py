"""Evaluate arithmetic over fractions

Expressions are read with the `ast` module and handled in passes, each one a
node visitor or transformer:

1. `ExpressionValidator` rejects anything but integers, `+ - * /`, unary signs
   and parentheses.
2. `FractionLiteralRewriter` turns every `<int> / <int>` pair into a
   `__fraction__(<int>, <int>)` constructor call, so `1/2` is a literal rather
   than a division.
3. `Evaluator` folds the tree into a single fraction.

"""

import ast
import logging

import astor

from .errors import MalformedFraction
from .fraction import Rational

log = logging.getLogger(__name__)

FRACTION = '__fraction__'

OPERATORS = (ast.Add, ast.Sub, ast.Mult, ast.Div)
SIGNS = (ast.UAdd, ast.USub)


def is_integer(node):
    return isinstance(node, ast.Constant) and type(node.value) is int

def is_literal(node):
    """Check for an integer, optionally signed, e.g. `3` or `-3`"""
    if isinstance(node, ast.UnaryOp) and isinstance(node.op, SIGNS):
        return is_integer(node.operand)
    return is_integer(node)

def literal_value(node):
    if isinstance(node, ast.UnaryOp):
        value = literal_value(node.operand)
        return -value if isinstance(node.op, ast.USub) else value
    return node.value

def make_fraction(numerator, denominator):
    """Return a ast.Call that looks like

    ```
    __fraction__(numerator, denominator)
    ```

    """
    call = ast.Call(
        func=ast.Name(id=FRACTION, ctx=ast.Load()),
        args=[numerator, denominator],
        keywords=[]
    )
    return call

class ExpressionValidator(ast.NodeVisitor):
    """Reject every node an arithmetic expression cannot contain"""

    def __init__(self, source):
        super(__class__, self).__init__()
        self.source = source

    def generic_visit(self, node):
        allowed = (ast.Expression, ast.BinOp, ast.UnaryOp, ast.Load) + OPERATORS + SIGNS
        if not isinstance(node, allowed):
            raise MalformedFraction(self.source, f'unsupported syntax {type(node).__name__}')
        super(__class__, self).generic_visit(node)

    def visit_Constant(self, node):
        if not is_integer(node):
            raise MalformedFraction(self.source, f'{node.value!r} is not an integer')

class FractionLiteralRewriter(ast.NodeTransformer):
    """Rewrite `a / b` on two integer literals into a fraction constructor call"""

    def visit_BinOp(self, binop):
        """Rewrite the children first, then this node

        >>> self = FractionLiteralRewriter()
        >>> binop = ast.parse('1/2 + 3', mode='eval').body.left

        """
        self.generic_visit(binop)
        if isinstance(binop.op, ast.Div) and is_literal(binop.left) and is_literal(binop.right):
            call = make_fraction(binop.left, binop.right)
            return ast.copy_location(call, binop)
        return binop

class Evaluator(ast.NodeVisitor):
    """Fold a validated, rewritten expression into a fraction of class `cls`"""

    def __init__(self, cls=Rational):
        super(__class__, self).__init__()
        self.cls = cls

    def visit_Expression(self, expression):
        return self.visit(expression.body)

    def visit_Constant(self, constant):
        return self.cls.from_integer(constant.value)

    def visit_Call(self, call):
        numerator, denominator = [literal_value(arg) for arg in call.args]
        return self.cls(numerator, denominator)

    def visit_UnaryOp(self, unaryop):
        operand = self.visit(unaryop.operand)
        return -operand if isinstance(unaryop.op, ast.USub) else operand

    def visit_BinOp(self, binop):
        left, right = self.visit(binop.left), self.visit(binop.right)
        if isinstance(binop.op, ast.Add):
            return left.add(right)
        elif isinstance(binop.op, ast.Sub):
            return left.subtract(right)
        elif isinstance(binop.op, ast.Mult):
            return left.multiply(right)
        else:
            assert isinstance(binop.op, ast.Div)
            return left.divide(right)

def parse_expression(source):
    """Parse and validate `source`, then rewrite its fraction literals

    Raises:
        MalformedFraction: `source` is not an arithmetic expression

    """
    if not isinstance(source, str):
        raise MalformedFraction(source, f'expected str, got {type(source).__name__}')
    try:
        tree = ast.parse(source.strip(), mode='eval')
    except SyntaxError as e:
        raise MalformedFraction(source, e.msg) from e
    ExpressionValidator(source).visit(tree)
    tree = FractionLiteralRewriter().visit(tree)
    return ast.fix_missing_locations(tree)

def rewrite(source):
    """Return `source` as it reads once fraction literals are made explicit

    >>> source = '1/2 + -3/4 * 2'

    """
    tree = parse_expression(source)
    return astor.to_source(tree.body).strip()

def evaluate(source, cls=Rational):
    """Evaluate `source`

    Args:
        source (str): e.g. `'1/2 + 1/3 * 3 - 1'`
        cls (type): fraction class every intermediate value is built as

    Returns:
        r (Rational): the exact result

    Raises:
        MalformedFraction: unsupported syntax
        InvalidDenominator: a literal such as `1/0`
        DivisionByZero: a division by an expression equal to zero

    """
    tree = parse_expression(source)
    result = Evaluator(cls).visit(tree)
    log.debug('evaluated %r to %s', source, result)
    return result

def sum_values(values):
    """Add integers, floats and fractions together as a float"""
    total = 0.0
    for value in values:
        total += value.to_double() if isinstance(value, Rational) else float(value)
    return total
