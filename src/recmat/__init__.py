"""
recmat - Matrix data types for recommender systems

Memory-conscious matrix types with a shared capability interface:

- SkewSymmetricSparseMatrix: stores only row < column, M[y, x] = -M[x, y]
- SymmetricSparseMatrix: stores only row <= column, M[y, x] = M[x, y]
- SparseMatrix: general row-indexed sparse matrix (list of per-row dicts)
- DenseMatrix: numpy-backed dense matrix

Architecture:
    ┌──────────────────────────────────────────────┐
    │  MatrixBase (get / set / create_matrix ...)  │
    ├──────────────────────────────────────────────┤
    │  SparseMatrix ── SkewSymmetric / Symmetric   │
    │  DenseMatrix                                 │
    └──────────────────────────────────────────────┘

Example:
    >>> from recmat import SkewSymmetricSparseMatrix
    >>>
    >>> mat = SkewSymmetricSparseMatrix(5)
    >>> mat[1, 3] = 1
    >>> mat[3, 1]
    -1
    >>> mat.is_symmetric
    False
    >>>
    >>> # Same-shaped empty matrix of the same concrete type
    >>> other = mat.create_matrix(4, 4)
"""

import logging

__version__ = '0.1.0'

from ._base import MatrixBase, is_matrix_like
from ._sparse import SparseMatrix
from ._skew import SkewSymmetricSparseMatrix, IntSkewSymmetricSparseMatrix
from ._symmetric import SymmetricSparseMatrix
from ._dense import DenseMatrix
from ._errors import (
    MatrixError,
    InvalidArgumentError,
    IndexOutOfBoundsError,
)
from ._config import (
    AccessConfig,
    RecmatConfig,
    config,
    get_config,
    set_strict_bounds,
)

logging.getLogger("recmat").addHandler(logging.NullHandler())

__all__ = [
    # Version
    '__version__',

    # Matrix types
    'MatrixBase',
    'SparseMatrix',
    'SkewSymmetricSparseMatrix',
    'IntSkewSymmetricSparseMatrix',
    'SymmetricSparseMatrix',
    'DenseMatrix',
    'is_matrix_like',

    # Errors
    'MatrixError',
    'InvalidArgumentError',
    'IndexOutOfBoundsError',

    # Configuration
    'AccessConfig',
    'RecmatConfig',
    'config',
    'get_config',
    'set_strict_bounds',
]
