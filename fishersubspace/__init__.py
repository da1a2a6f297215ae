"""
fishersubspace
==============

Fisher / Linear Discriminant Analysis on labeled sample matrices and the
generic linear subspace projection it is used with.

>>> import numpy as np
>>> from fishersubspace import LDA
>>> X = np.array([[1., 2.], [2., 1.], [1., 1.], [2., 2.],
...               [6., 2.], [7., 1.], [6., 1.], [7., 2.]])
>>> lda = LDA().compute(X, [0, 0, 0, 0, 1, 1, 1, 1])
>>> lda.eigenvectors.shape
(2, 1)
"""

import logging as _logging

from .eigen import general_eig, rank_eigenpairs
from .exceptions import (
    InvalidArgument,
    SingularMatrix,
    SmallSampleWarning,
    SubspaceError,
    UnsupportedElementType,
)
from .helper import (
    argsort,
    as_column_matrix,
    as_row_matrix,
    is_symmetric,
    remove_dups,
    sort_matrix_by_column,
    sort_matrix_by_row,
    transpose,
)
from .subspace import LDA, project, reconstruct

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__all__ = [
    "LDA",
    "project",
    "reconstruct",
    "general_eig",
    "rank_eigenpairs",
    "argsort",
    "as_column_matrix",
    "as_row_matrix",
    "is_symmetric",
    "remove_dups",
    "sort_matrix_by_column",
    "sort_matrix_by_row",
    "transpose",
    "SubspaceError",
    "InvalidArgument",
    "SingularMatrix",
    "UnsupportedElementType",
    "SmallSampleWarning",
]
