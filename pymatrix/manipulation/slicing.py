"""
Sub-matrix extraction.
"""

import numpy as np

from pymatrix.manipulation.extractors import All, Extractor, resolve
from pymatrix.matrix.storage import Matrix


def slice(m: Matrix, er: Extractor, ec: Extractor) -> Matrix:
    """
    Build a new matrix from the rows selected by er and the columns
    selected by ec.

    result[i, j] = m[rows[i], cols[j]], where rows and cols are the
    explicit positions the extractors normalise to. Positions may repeat
    and may come in any order.

    Args:
        m: Source matrix
        er: Row extractor
        ec: Column extractor

    Returns:
        New matrix of shape len(rows) x len(cols); m is not modified

    Raises:
        IndexOutOfBoundsError: If either extractor is out of bounds

    Example:
        >>> m = Matrix([[0, 1, 2], [3, 4, 5]])
        >>> slice(m, Take(1), Range(2, -1, 0))
        Matrix([[2.0, 1.0, 0.0]])
    """
    if isinstance(er, All) and isinstance(ec, All):
        return Matrix(m)

    rows, cols = resolve(er, ec, m.rows, m.cols)
    block = m._grid[np.ix_(rows, cols)]
    return Matrix._wrap(len(rows), len(cols), np.ascontiguousarray(block).ravel())
