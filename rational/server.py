"""EPC server exposing fraction arithmetic

Lets an editor (or any EPC peer) do exact fraction arithmetic. Fractions cross
the wire as `<numerator>/<denominator>` text; coercions come back as numbers.

Every registered function takes the equality policy and width of the server's
fraction class, chosen when the server is made.

"""

import logging

import plac
from epc.server import EPCServer

from . import register
from .expression import evaluate as evaluate_expression
from .fraction import rational_type
from .parser import parse as parse_fraction


def register_functions(server, cls):
    """Register the fraction operations on `server`

    Args:
        server (EPCServer): server to register on
        cls (type): fraction class used to parse every argument

    Returns:
        names (list): names of the registered functions

    """
    @server.register_function
    def parse(text):
        return parse_fraction(text, cls).to_text()

    @server.register_function
    def add(a, b):
        return parse_fraction(a, cls).add(parse_fraction(b, cls)).to_text()

    @server.register_function
    def subtract(a, b):
        return parse_fraction(a, cls).subtract(parse_fraction(b, cls)).to_text()

    @server.register_function
    def subtract_int(a, n):
        return parse_fraction(a, cls).subtract_int(int(n)).to_text()

    @server.register_function
    def multiply(a, b):
        return parse_fraction(a, cls).multiply(parse_fraction(b, cls)).to_text()

    @server.register_function
    def divide(a, b):
        return parse_fraction(a, cls).divide(parse_fraction(b, cls)).to_text()

    @server.register_function
    def to_int(a):
        return parse_fraction(a, cls).to_int()

    @server.register_function
    def to_long(a):
        return parse_fraction(a, cls).to_long()

    @server.register_function
    def to_float(a):
        return parse_fraction(a, cls).to_float()

    @server.register_function
    def to_double(a):
        return parse_fraction(a, cls).to_double()

    @server.register_function
    def equals(a, b):
        return parse_fraction(a, cls) == parse_fraction(b, cls)

    @server.register_function
    def evaluate(source):
        return evaluate_expression(source, cls).to_text()

    names = ['parse', 'add', 'subtract', 'subtract_int', 'multiply', 'divide',
             'to_int', 'to_long', 'to_float', 'to_double', 'equals', 'evaluate']
    return names

def make_server(address=('localhost', 0), equality='structural', bits=32):
    """Create a server with every fraction operation registered

    Binding port 0 lets the OS pick a free port; `print_port()` reports it.

    """
    cls = rational_type(equality, bits)
    server = EPCServer(address)
    names = register_functions(server, cls)
    logging.info(f'Serving {", ".join(names)} with {cls.__name__}')
    return server


@plac.annotations(
        host=('address to bind', 'option', 'H', str),
        port=('port to bind, 0 picks a free one', 'option', 'p', int),
        equality=('equality policy: structural or cross', 'option', 'e', str),
        bits=('integer width: 32 or 64', 'option', 'b', int),
)
def main(host='localhost', port=0, equality='structural', bits=32):
    """Serve fraction arithmetic until killed"""
    logging.basicConfig(level=logging.INFO)
    register()
    server = make_server((host, port), equality, bits)
    server.print_port()
    server.serve_forever()


if __name__ == '__main__':
    plac.call(main)
