"""
Exception hierarchy for pymatrix.

Every error raised by the library is a PyMatrixError. Precondition
failures (bad shapes, bad indices) are ValidationErrors and are raised
before any work is done. Failures reported by a LAPACK kernel through
its info code are NumericalErrors or ConvergenceErrors and carry the
routine name and the info value.
"""


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised for non-positive dimensions, ragged literals, non-conformant
    products, non-square inputs to square-only operations and blocks
    whose width does not match the matrix they are inserted into.
    """
    pass


class IndexOutOfBoundsError(ValidationError, IndexError):
    """
    Element, row, column or slice index outside the matrix.

    Also an IndexError, so iteration protocols and callers expecting the
    builtin exception keep working.

    Attributes:
        index: The offending index (or extractor parameter)
        size: Size of the axis the index was checked against
    """

    def __init__(
        self,
        message: str,
        index: object | None = None,
        size: int | None = None
    ):
        super().__init__(message)
        self.index = index
        self.size = size


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors reported by a dense linear-algebra kernel
    through a positive status code.

    Attributes:
        routine: Name of the LAPACK routine that reported the failure
        info: The routine's status code
    """

    def __init__(
        self,
        message: str,
        routine: str | None = None,
        info: int | None = None
    ):
        super().__init__(message)
        self.routine = routine
        self.info = info


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or rank-deficient.

    Raised by inverse() when the LU factor has an exactly zero pivot and
    by lstsqr() when the coefficient matrix does not have full rank.
    """
    pass


class NotPositiveDefiniteError(NumericalError):
    """
    Matrix is not positive definite.

    Raised by chol(). The info attribute is the order of the leading
    minor that is not positive definite.
    """
    pass


class ConvergenceError(PyMatrixError):
    """
    Iterative kernel failed to converge.

    Raised when the QR algorithm inside an eigenvalue or singular value
    routine does not converge.

    Attributes:
        routine: Name of the LAPACK routine
        info: The routine's status code (number of unconverged values)
    """

    def __init__(
        self,
        message: str,
        routine: str | None = None,
        info: int | None = None
    ):
        super().__init__(message)
        self.routine = routine
        self.info = info


class KernelError(PyMatrixError):
    """
    A kernel rejected one of its arguments (negative status code).

    This always indicates a bug in the calling code, never bad user data.

    Attributes:
        routine: Name of the LAPACK routine
        argument: 1-based position of the illegal argument
    """

    def __init__(self, message: str, routine: str, argument: int):
        super().__init__(message)
        self.routine = routine
        self.argument = argument
