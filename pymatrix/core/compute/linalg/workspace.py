"""
Two-phase LAPACK workspace protocol.

LAPACK routines that need scratch memory are called twice: once in
"query" mode, which only reports the optimal workspace size, and once
with a workspace of exactly that size. SciPy exposes the query phase in
two flavours, and both are wrapped here:

    - dedicated ``<routine>_lwork`` functions (getri, geev, gesdd, gels)
    - calling the routine itself with ``lwork=-1`` (geqrf, orgqr), in
      which case the size comes back in the first entry of ``work``

Status codes are also interpreted here: a negative ``info`` means the
caller passed an illegal argument and is always raised as KernelError.
Positive codes are routine-specific and left to the caller.
"""

from typing import Any, Callable

import numpy as np
from scipy.linalg.lapack import get_lapack_funcs

from pymatrix.core.exceptions import KernelError


def lapack_routines(names: tuple[str, ...], *arrays: np.ndarray) -> tuple[Callable[..., Any], ...]:
    """
    Resolve double-precision LAPACK routines for the given arrays.

    Args:
        names: Routine names without type prefix, e.g. ('getrf', 'getri')
        *arrays: Arrays used to choose the type prefix

    Returns:
        Tuple of callables in the order of names
    """
    return tuple(get_lapack_funcs(names, arrays, dtype=np.float64))


def check_argument_info(info: int, routine: str) -> None:
    """
    Raise KernelError for a negative LAPACK status code.

    Args:
        info: Status code returned by the routine
        routine: Routine name for the error message

    Raises:
        KernelError: If info < 0
    """
    if info < 0:
        raise KernelError(
            f"{routine}: illegal value in argument {-info}",
            routine=routine,
            argument=-int(info),
        )


def _workspace_size(work: Any) -> int:
    """Convert a reported optimal workspace (a float) to an element count."""
    size = float(np.real(np.ravel(work)[0]))
    return max(int(np.ceil(size)), 1)


def query_workspace(lwork_routine: Callable[..., Any], routine: str, *args: Any, **kwargs: Any) -> int:
    """
    Query phase using a dedicated ``*_lwork`` routine.

    Args:
        lwork_routine: e.g. dgetri_lwork
        routine: Name of the routine being sized, for error messages
        *args, **kwargs: Dimensions/flags forwarded to the query routine

    Returns:
        Optimal workspace length
    """
    work, info = lwork_routine(*args, **kwargs)
    check_argument_info(info, f"{routine}_lwork")
    return _workspace_size(work)


def query_workspace_inplace(routine_fn: Callable[..., Any], routine: str, *args: Any, **kwargs: Any) -> int:
    """
    Query phase calling the routine itself with ``lwork=-1``.

    The routine returns ``(..., work, info)``; only ``work[0]`` is used.

    Args:
        routine_fn: e.g. dgeqrf
        routine: Routine name for error messages
        *args, **kwargs: Arguments forwarded to the routine

    Returns:
        Optimal workspace length
    """
    result = routine_fn(*args, lwork=-1, **kwargs)
    work, info = result[-2], result[-1]
    check_argument_info(info, routine)
    return _workspace_size(work)
