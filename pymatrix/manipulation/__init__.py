"""
Structural manipulation: slicing, insertion and concatenation.

Pure index arithmetic over the row-major buffer; no floating-point
computation happens here.

Public API:
    slice(m, er, ec)            - Sub-matrix selected by two extractors
    All, Range, Pos, PosCyc,
    Take, TakeLast, Drop,
    DropLast                    - Extractor variants
    insert(m, ..., at=)         - Insert row(s)/column(s)
    append(m, ...)              - Insert at the end
    prepend(m, ...)             - Insert at the start
    hconcat(a, b)               - Stack by rows (grows row count)
    vconcat(a, b)               - Stack by columns (grows column count)
    vstack, hstack              - Conventional list concatenation
"""

from pymatrix.manipulation.extractors import (
    All,
    Drop,
    DropLast,
    Extractor,
    Pos,
    PosCyc,
    Range,
    Take,
    TakeLast,
    resolve,
)
from pymatrix.manipulation.insertion import (
    append,
    hconcat,
    hstack,
    insert,
    prepend,
    vconcat,
    vstack,
)
from pymatrix.manipulation.slicing import slice

__all__ = [
    "Extractor",
    "All",
    "Range",
    "Pos",
    "PosCyc",
    "Take",
    "TakeLast",
    "Drop",
    "DropLast",
    "resolve",
    "slice",
    "insert",
    "append",
    "prepend",
    "hconcat",
    "vconcat",
    "vstack",
    "hstack",
]
