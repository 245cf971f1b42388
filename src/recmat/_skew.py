"""
Skew-Symmetric Sparse Matrix

A skew-symmetric (anti-symmetric) matrix satisfies M[y, x] == -M[x, y],
which forces every diagonal element to zero. Only cells with row < column
are stored; reads from the lower triangle negate the mirrored cell. This
halves memory compared to a general sparse matrix.

    logical             stored
    [  0  a  b ]        row_list = [
    [ -a  0  c ]   =>       {1: a, 2: b},
    [ -b -c  0 ]            {2: c},
                        ]

Be careful with ``non_empty_rows`` and ``non_empty_entry_ids``: they list
only the stored cells (row < column), not their negated counterparts.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Tuple

import numpy as np

from ._base import _split_key
from ._errors import (
    InvalidArgumentError,
    check_dimension,
    check_index,
    check_square,
)
from ._sparse import SparseMatrix, _count_nonzero

__all__ = ['SkewSymmetricSparseMatrix', 'IntSkewSymmetricSparseMatrix']

logger = logging.getLogger("recmat.skew")


class SkewSymmetricSparseMatrix(SparseMatrix):
    """
    Square sparse integer matrix with M[y, x] == -M[x, y].

    Args:
        num_rows: Number of rows (and columns)

    Example:
        >>> mat = SkewSymmetricSparseMatrix(5)
        >>> mat[1, 3] = 1
        >>> mat[3, 1]
        -1
        >>> mat.is_symmetric
        False
    """

    def __init__(self, num_rows: int):
        num_rows = check_dimension(num_rows, "num_rows")
        super().__init__(num_rows, num_rows, dtype=np.int64)

    @classmethod
    def _allocate(cls, num_rows: int, num_columns: int, dtype) -> 'SkewSymmetricSparseMatrix':
        check_square(num_rows, num_columns, "Skew symmetric")
        if not np.issubdtype(np.dtype(dtype), np.integer):
            raise TypeError(
                f"{cls.__name__} holds integers only, got dtype {np.dtype(dtype)}"
            )
        return cls(num_rows)

    @classmethod
    def _validate_layout(cls, values, transposed) -> None:
        check_square(values.shape[0], values.shape[1], "Skew symmetric")
        if _count_nonzero(values + transposed) != 0:
            raise InvalidArgumentError("values are not skew symmetric")

    @staticmethod
    def _stores_cell(x: int, y: int) -> bool:
        return x < y

    # =========================================================================
    # Element Access
    # =========================================================================

    def __getitem__(self, key) -> int:
        x, y = _split_key(key)
        self._check_access(x, y)
        if x < y:
            return self._lookup(x, y)
        if x > y:
            return -self._lookup(y, x)
        return 0

    def __setitem__(self, key, value) -> None:
        x, y = _split_key(key)
        value = check_index(value, "value")
        self._check_access(x, y)
        if x < y:
            self._store(x, y, value)
        elif x > y:
            self._store(y, x, value)
        elif value != 0:
            raise InvalidArgumentError(
                f"diagonal must be zero, got {value} at ({x}, {y})"
            )

    # =========================================================================
    # Matrix Capability
    # =========================================================================

    @property
    def is_symmetric(self) -> bool:
        """Only true if all entries are zero."""
        for i, row in enumerate(self._row_list):
            for j in row:
                if self._lookup(i, j) != 0:
                    return False
        return True

    def create_matrix(self, num_rows: int, num_columns: int) -> 'SkewSymmetricSparseMatrix':
        check_square(num_rows, num_columns, "Skew symmetric")
        logger.debug("Creating %s with %d rows", type(self).__name__, num_rows)
        return type(self)(num_rows)

    def transpose(self) -> 'SkewSymmetricSparseMatrix':
        """The transpose of a skew-symmetric matrix is its negation."""
        transposed = type(self)(self._num_rows)
        transposed._row_list = [
            {j: -value for j, value in row.items()} for row in self._row_list
        ]
        return transposed

    def resize(self, num_rows: int, num_columns: int) -> None:
        check_square(num_rows, num_columns, "Skew symmetric")
        super().resize(num_rows, num_columns)

    def iter_entries(self) -> Iterator[Tuple[int, int, Any]]:
        for i, row in enumerate(self._row_list):
            for j, value in row.items():
                yield i, j, value
                yield j, i, -value


# Alias spelling out the value type.
IntSkewSymmetricSparseMatrix = SkewSymmetricSparseMatrix
