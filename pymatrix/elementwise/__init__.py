"""
Elementwise arithmetic, functions, statistics and random matrices.

Thin layers over NumPy that work on the flat row-major buffer. The
Matrix operators (+, -, *, /, unary -, abs) call into this package.

Submodules:
    arithmetic: plus, minus, times, rdivide, ldivide, uminus, absolute, thr
    functions: power, square, sqrt, exp, log, log10, log2, sin, cos, tan
    statistics: max, maxi, min, mini, mean, std, normalize, sum, sumsq,
                map, reduce (shadow the builtins; import the module)
    random: rand, randn
"""

from pymatrix.elementwise import statistics
from pymatrix.elementwise.arithmetic import (
    absolute,
    ldivide,
    minus,
    plus,
    rdivide,
    thr,
    times,
    uminus,
)
from pymatrix.elementwise.functions import (
    cos,
    exp,
    log,
    log2,
    log10,
    power,
    sin,
    sqrt,
    square,
    tan,
)
from pymatrix.elementwise.random import rand, randn

__all__ = [
    "statistics",
    # Arithmetic
    "plus",
    "minus",
    "times",
    "rdivide",
    "ldivide",
    "uminus",
    "absolute",
    "thr",
    # Functions
    "power",
    "square",
    "sqrt",
    "exp",
    "log",
    "log10",
    "log2",
    "sin",
    "cos",
    "tan",
    # Random
    "rand",
    "randn",
]
