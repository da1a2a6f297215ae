"""Matrix helpers shared by the subspace methods."""
import numpy as np

from .exceptions import InvalidArgument, UnsupportedElementType

# signed / unsigned integers and floats
SUPPORTED_KINDS = "iuf"


def check_element_type(src, name="src"):
    """Return ``src`` as an ndarray, rejecting element types we can't compute with."""
    src = np.asarray(src)
    if src.dtype.kind not in SUPPORTED_KINDS:
        raise UnsupportedElementType(
            f"{name} has unsupported element type {src.dtype}; "
            "expected an integer or floating point array"
        )
    return src


def convert(src, dtype, alpha=1.0, beta=0.0):
    """Scale ``src`` by ``alpha``, shift by ``beta`` and cast to ``dtype``.

    Integer targets are rounded and saturated to the target range instead
    of wrapping around.
    """
    dtype = np.dtype(dtype)
    values = np.asarray(src, dtype=np.float64)
    if alpha != 1 or beta != 0:
        values = values * alpha + beta
    if dtype.kind in "iu":
        info = np.iinfo(dtype)
        values = np.clip(np.rint(values), info.min, info.max)
    return values.astype(dtype)


def remove_dups(src):
    """Sorted distinct values of ``src``.

    >>> remove_dups([2, 1, 2, 3, 1]).tolist()
    [1, 2, 3]
    """
    return np.unique(np.asarray(src))


def argsort(src, ascending=True):
    """Indices that sort a 1D array (or a 1xN / Nx1 matrix).

    Equal values keep their original order in both directions.
    """
    src = check_element_type(src)
    if src.ndim > 2 or (src.ndim == 2 and 1 not in src.shape):
        raise InvalidArgument("argsort only sorts 1D matrices.")
    values = src.reshape(-1)
    if ascending:
        return np.argsort(values, kind="stable")
    # stable ascending sort of the reversed array, mapped back; no negation,
    # so integer minimums can't overflow
    n = values.size
    return n - 1 - np.argsort(values[::-1], kind="stable")[::-1]


def sort_matrix_by_column(src, indices):
    """Column ``i`` of the result is column ``indices[i]`` of ``src``."""
    src = np.asarray(src)
    indices = np.asarray(indices, dtype=np.intp).reshape(-1)
    if src.ndim != 2:
        raise InvalidArgument(f"expected a 2D matrix, got shape {src.shape}")
    return src[:, indices].copy()


def sort_matrix_by_row(src, indices):
    """Row ``i`` of the result is row ``indices[i]`` of ``src``."""
    src = np.asarray(src)
    indices = np.asarray(indices, dtype=np.intp).reshape(-1)
    if src.ndim != 2:
        raise InvalidArgument(f"expected a 2D matrix, got shape {src.shape}")
    return src[indices, :].copy()


def _check_same_size(src):
    sizes = {np.size(s) for s in src}
    if len(sizes) != 1:
        raise InvalidArgument(
            f"all samples must have the same number of elements, got sizes {sorted(sizes)}"
        )
    return sizes.pop()


def as_row_matrix(src, dtype=np.float64, alpha=1.0, beta=0.0):
    """Stack a list of samples into a matrix with one flattened sample per row."""
    n = len(src)
    if n == 0:
        return np.empty((0, 0), dtype=dtype)
    d = _check_same_size(src)
    data = np.empty((n, d), dtype=dtype)
    for i, xi in enumerate(src):
        data[i, :] = convert(check_element_type(xi).reshape(-1), dtype, alpha, beta)
    return data


def as_column_matrix(src, dtype=np.float64, alpha=1.0, beta=0.0):
    """Stack a list of samples into a matrix with one flattened sample per column."""
    n = len(src)
    if n == 0:
        return np.empty((0, 0), dtype=dtype)
    d = _check_same_size(src)
    data = np.empty((d, n), dtype=dtype)
    for i, yi in enumerate(src):
        data[:, i] = convert(check_element_type(yi).reshape(-1), dtype, alpha, beta)
    return data


def transpose(src):
    return np.ascontiguousarray(np.asarray(src).T)


def is_symmetric(src, eps=1e-16):
    """Check whether ``src`` is a symmetric matrix.

    Integer matrices are compared exactly, floating point ones within ``eps``.

    >>> is_symmetric(np.array([[1., 2.], [2., 1.]]))
    True
    >>> is_symmetric(np.array([[1., 2.], [3., 4.]]))
    False
    """
    src = np.asarray(src)
    if src.ndim != 2 or src.shape[0] != src.shape[1]:
        return False
    if src.dtype.kind in "iu":
        return bool(np.array_equal(src, src.T))
    if src.dtype.kind == "f":
        return bool(np.all(np.abs(src - src.T) <= eps))
    return False
