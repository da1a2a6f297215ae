import logging

import numpy as np
from scipy.linalg import eig

from .exceptions import InvalidArgument
from .helper import argsort, sort_matrix_by_column

logger = logging.getLogger(__name__)


def general_eig(M):
    """Eigen-decompose a square, not necessarily symmetric matrix.

    Returns ``(eigenvalues, eigenvectors)`` with the eigenvectors as columns.
    Both may be complex and are not sorted.
    """
    M = np.asarray(M)
    if M.ndim != 2 or M.shape[0] != M.shape[1]:
        raise InvalidArgument(f"eigendecomposition needs a square matrix, got shape {M.shape}")
    return eig(M)


def rank_eigenpairs(eigenvalues, eigenvectors, num_components=None):
    """Sort eigenpairs by eigenvalue, largest first, and keep ``num_components``.

    Imaginary parts are dropped before ranking. Equal eigenvalues keep the
    order the solver returned them in.
    """
    eigenvalues = np.asarray(eigenvalues).reshape(-1)
    eigenvectors = np.asarray(eigenvectors)
    if eigenvectors.ndim != 2 or eigenvectors.shape[1] != eigenvalues.size:
        raise InvalidArgument(
            f"got {eigenvalues.size} eigenvalues for eigenvectors of shape {eigenvectors.shape}"
        )

    if np.iscomplexobj(eigenvalues) or np.iscomplexobj(eigenvectors):
        logger.debug(
            "discarding imaginary parts (max |imag| eigenvalue %.3g, eigenvector %.3g)",
            np.max(np.abs(np.imag(eigenvalues)), initial=0.0),
            np.max(np.abs(np.imag(eigenvectors)), initial=0.0),
        )
        eigenvalues = np.real(eigenvalues)
        eigenvectors = np.real(eigenvectors)

    sorted_indices = argsort(eigenvalues, ascending=False)
    if num_components is not None:
        sorted_indices = sorted_indices[:num_components]

    eigenvalues = eigenvalues[sorted_indices].copy()
    eigenvectors = sort_matrix_by_column(eigenvectors, sorted_indices)
    return eigenvalues, eigenvectors
