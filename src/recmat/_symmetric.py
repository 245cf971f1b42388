"""
Symmetric Sparse Matrix

Stores each pair once, at row min(x, y) and column max(x, y), the diagonal
included. Reads from either triangle return the same cell.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Tuple

import numpy as np

from ._base import _split_key
from ._errors import InvalidArgumentError, check_dimension, check_square
from ._sparse import SparseMatrix, _count_nonzero

__all__ = ['SymmetricSparseMatrix']

logger = logging.getLogger("recmat.symmetric")


class SymmetricSparseMatrix(SparseMatrix):
    """
    Square sparse matrix with M[y, x] == M[x, y].

    Like the skew-symmetric variant, ``non_empty_rows`` and
    ``non_empty_entry_ids`` only report the stored upper triangle.
    """

    def __init__(self, num_rows: int, dtype=np.int64):
        num_rows = check_dimension(num_rows, "num_rows")
        super().__init__(num_rows, num_rows, dtype=dtype)

    @classmethod
    def _allocate(cls, num_rows: int, num_columns: int, dtype) -> 'SymmetricSparseMatrix':
        check_square(num_rows, num_columns, "Symmetric")
        return cls(num_rows, dtype=dtype)

    @classmethod
    def _validate_layout(cls, values, transposed) -> None:
        check_square(values.shape[0], values.shape[1], "Symmetric")
        if _count_nonzero(values - transposed) != 0:
            raise InvalidArgumentError("values are not symmetric")

    @staticmethod
    def _stores_cell(x: int, y: int) -> bool:
        return x <= y

    def __getitem__(self, key) -> Any:
        x, y = _split_key(key)
        self._check_access(x, y)
        if x <= y:
            return self._lookup(x, y)
        return self._lookup(y, x)

    def __setitem__(self, key, value) -> None:
        x, y = _split_key(key)
        self._check_access(x, y)
        if x <= y:
            self._store(x, y, value)
        else:
            self._store(y, x, value)

    @property
    def is_symmetric(self) -> bool:
        return True

    def create_matrix(self, num_rows: int, num_columns: int) -> 'SymmetricSparseMatrix':
        check_square(num_rows, num_columns, "Symmetric")
        logger.debug("Creating %s with %d rows", type(self).__name__, num_rows)
        return type(self)(num_rows, dtype=self._dtype)

    def transpose(self) -> 'SymmetricSparseMatrix':
        return self.copy()

    def resize(self, num_rows: int, num_columns: int) -> None:
        check_square(num_rows, num_columns, "Symmetric")
        super().resize(num_rows, num_columns)

    def iter_entries(self) -> Iterator[Tuple[int, int, Any]]:
        for i, row in enumerate(self._row_list):
            for j, value in row.items():
                yield i, j, value
                if i != j:
                    yield j, i, value
