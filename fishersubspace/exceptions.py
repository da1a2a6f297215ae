import numpy as np


class SubspaceError(Exception):
    """Base class for errors raised by fishersubspace."""


class InvalidArgument(SubspaceError, ValueError):
    pass


class SingularMatrix(SubspaceError, np.linalg.LinAlgError):
    pass


class UnsupportedElementType(SubspaceError, TypeError):
    pass


class SmallSampleWarning(UserWarning):
    """Fewer observations than feature dimensions were given."""
