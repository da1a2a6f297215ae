import logging
import warnings
from collections import namedtuple

import numpy as np
from scipy.linalg import LinAlgError, inv
from sklearn.base import BaseEstimator, TransformerMixin
from sklearn.utils.validation import check_is_fitted

from .eigen import general_eig, rank_eigenpairs
from .exceptions import InvalidArgument, SingularMatrix, SmallSampleWarning
from .helper import as_column_matrix, as_row_matrix, check_element_type, remove_dups, transpose

logger = logging.getLogger(__name__)

# learned basis: eigenvalues (k,) and eigenvectors (d, k), largest eigenvalue first
Subspace = namedtuple("Subspace", ["eigenvalues", "eigenvectors"])


def _as_samples(src, dtype):
    X = check_element_type(src)
    if X.ndim == 1:
        X = X.reshape(1, -1)
    elif X.ndim != 2:
        raise InvalidArgument(f"expected a 2D sample matrix, got shape {X.shape}")
    return X.astype(dtype)


def _is_sample_collection(src):
    return (
        isinstance(src, (list, tuple))
        and len(src) > 0
        and all(isinstance(s, np.ndarray) for s in src)
    )


def _mean_matches(mean, d):
    return mean is not None and np.size(mean) > 0 and np.size(mean) == d


def project(W, mean, src):
    """Project samples into the subspace spanned by the columns of W.

    Computes ``Y = (X - mean) W``. The mean is only subtracted when it has
    one entry per feature; pass ``None`` to project without centering.
    """
    W = check_element_type(W, "W")
    X = _as_samples(src, W.dtype)
    n, d = X.shape
    if d != W.shape[0]:
        raise InvalidArgument(f"samples have {d} features but the basis expects {W.shape[0]}")
    if _mean_matches(mean, d):
        X = X - np.reshape(mean, (1, d))
    return X @ W


def reconstruct(W, mean, src):
    """Reconstruct samples from their subspace coordinates.

    Computes ``X = Y W^T + mean``, adding the mean only when it has one
    entry per row of W.
    """
    W = check_element_type(W, "W")
    Y = _as_samples(src, W.dtype)
    if Y.shape[1] != W.shape[1]:
        raise InvalidArgument(
            f"coefficients have {Y.shape[1]} columns but the basis has {W.shape[1]} components"
        )
    X = Y @ W.T
    d = W.shape[0]
    if _mean_matches(mean, d):
        X = X + np.reshape(mean, (1, d))
    return X


class LDA(BaseEstimator, TransformerMixin):
    """Linear Discriminant Analysis with Fisher's optimization criterion.

    Parameters
    ----------
    num_components : int, default=0
        Number of discriminant directions to keep. Values ``<= 0`` or larger
        than ``C - 1`` (C distinct labels) are clamped to ``C - 1``.
    data_as_row : bool, default=True
        Whether samples are the rows (True) or the columns (False) of the
        matrices given to ``compute``, ``project`` and ``reconstruct``.
    eigen_solver : callable, default=None
        ``solver(M) -> (eigenvalues, eigenvectors)`` for a square matrix M,
        eigenvectors as columns. ``None`` uses :func:`general_eig`.

    Attributes
    ----------
    subspace_ : Subspace
        Eigenvalues and eigenvectors learned by the last ``compute``.
    classes_ : ndarray
        Sorted distinct labels seen by the last ``compute``.
    n_classes_ : int
    n_components_ : int
        Number of directions actually kept.

    Notes
    -----
    The between-class scatter sums the outer products of the class mean
    deviations without weighting them by class size, and ``project`` /
    ``reconstruct`` apply no centering offset although the scatter was
    computed on class-centered data.
    """

    def __init__(self, num_components=0, data_as_row=True, eigen_solver=None):
        self.num_components = num_components
        self.data_as_row = data_as_row
        self.eigen_solver = eigen_solver

    @property
    def eigenvalues(self):
        subspace = getattr(self, "subspace_", None)
        return None if subspace is None else subspace.eigenvalues

    @property
    def eigenvectors(self):
        subspace = getattr(self, "subspace_", None)
        return None if subspace is None else subspace.eigenvectors

    def compute(self, src, labels):
        """Compute the discriminants for the samples in src and their labels.

        ``src`` is either a single sample matrix, oriented according to
        ``data_as_row`` (nested lists included), or a list of sample arrays that
        are flattened and stacked one sample each.
        Any previously learned subspace is replaced.
        """
        if _is_sample_collection(src):
            src = as_row_matrix(src) if self.data_as_row else as_column_matrix(src)
        src = check_element_type(src)
        if src.ndim != 2:
            raise InvalidArgument("Only single channel matrices allowed.")
        data = src if self.data_as_row else transpose(src)
        # always a private copy, it gets centered in place below
        data = np.array(data, dtype=np.float64)
        n, d = data.shape

        labels = np.asarray(labels).reshape(-1)
        if labels.size != n:
            raise InvalidArgument(
                f"The number of samples must equal the number of labels ({n} != {labels.size})."
            )
        classes, mapped_labels = self._normalize_labels(labels)
        c = classes.size
        if c < 2:
            raise InvalidArgument(f"need at least 2 distinct labels, got {c}")
        if n < d:
            msg = (
                f"Less observations ({n}) than feature dimension ({d}) given! "
                "The within-class scatter is likely singular."
            )
            logger.warning(msg)
            warnings.warn(msg, SmallSampleWarning, stacklevel=2)

        num_components = self.num_components
        if num_components <= 0 or num_components > c - 1:
            num_components = c - 1
        logger.debug("computing LDA: n=%d d=%d classes=%d components=%d", n, d, c, num_components)

        mean_total, mean_class, _ = self._class_statistics(data, mapped_labels, c)
        # center every sample by its own class mean
        data -= mean_class[mapped_labels]

        Sw = self._within_class_scatter(data)
        Sb = self._between_class_scatter(mean_class, mean_total)
        M = self._invert(Sw) @ Sb

        solver = general_eig if self.eigen_solver is None else self.eigen_solver
        eigenvalues, eigenvectors = solver(M)
        eigenvalues, eigenvectors = rank_eigenpairs(eigenvalues, eigenvectors, num_components)

        self.subspace_ = Subspace(eigenvalues, eigenvectors)
        self.classes_ = classes
        self.n_classes_ = c
        self.n_components_ = num_components
        return self

    def fit(self, X, y):
        return self.compute(X, y)

    def project(self, src):
        """Project samples into the discriminant subspace."""
        check_is_fitted(self, "subspace_")
        X = np.asarray(src)
        return project(self.subspace_.eigenvectors, None, X if self.data_as_row else transpose(X))

    def reconstruct(self, src):
        """Map subspace coordinates back to the feature space."""
        check_is_fitted(self, "subspace_")
        Y = np.asarray(src)
        return reconstruct(self.subspace_.eigenvectors, None, Y if self.data_as_row else transpose(Y))

    def transform(self, X):
        return self.project(X)

    def inverse_transform(self, X):
        return self.reconstruct(X)

    @staticmethod
    def _normalize_labels(labels):
        """Map arbitrary labels to 0..C-1, following the sorted distinct values."""
        classes = remove_dups(labels)
        return classes, np.searchsorted(classes, labels)

    @staticmethod
    def _class_statistics(data, mapped_labels, c):
        n, d = data.shape
        sum_total = data.sum(axis=0)
        sum_class = np.zeros((c, d), dtype=data.dtype)
        np.add.at(sum_class, mapped_labels, data)
        num_class = np.bincount(mapped_labels, minlength=c)

        mean_total = sum_total / n
        mean_class = sum_class / num_class[:, np.newaxis]
        return mean_total, mean_class, num_class

    @staticmethod
    def _within_class_scatter(centered):
        return centered.T @ centered

    @staticmethod
    def _between_class_scatter(mean_class, mean_total):
        # every class counts once, whatever its size
        diff = mean_class - mean_total
        return diff.T @ diff

    @staticmethod
    def _invert(Sw):
        cond = np.linalg.cond(Sw)
        if not np.isfinite(cond) or cond >= 1.0 / np.finfo(np.float64).eps:
            raise SingularMatrix(
                f"within-class scatter is singular or ill-conditioned (condition number {cond:.3g})"
            )
        try:
            Swi = inv(Sw)
        except LinAlgError as e:
            raise SingularMatrix(f"within-class scatter is not invertible: {e}") from e
        if not np.all(np.isfinite(Swi)):
            raise SingularMatrix("inverse of the within-class scatter is not finite")
        return Swi
