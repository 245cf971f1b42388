"""
Row-Indexed Sparse Matrix

SparseMatrix stores its rows in a Python list. Each row is a dict mapping a
column index to the stored value. Rows are allocated lazily: the list only
grows when a write targets a row index past its current end, and it never
shrinks except through ``resize``.

Storage Layout:

    [ a . b ]          row_list = [
    [ . . . ]   =>         {0: a, 2: b},
    [ . c . ]              {},
                           {1: c},
                       ]

Reads of cells that were never written return zero. By default coordinates
beyond the declared shape are accepted (reads return zero, writes grow the
storage); strict bounds checking can be enabled through ``recmat.config``.

The half-storage variants (SkewSymmetricSparseMatrix, SymmetricSparseMatrix)
reuse this storage. For them ``non_empty_rows`` and ``non_empty_entry_ids``
report only the physically stored triangle, not the mirrored entries.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Tuple, Union, TYPE_CHECKING

import numpy as np

from ._base import MatrixBase, _split_key
from ._config import config
from ._errors import (
    IndexOutOfBoundsError,
    InvalidArgumentError,
    check_dimension,
)

if TYPE_CHECKING:
    from scipy.sparse import spmatrix

__all__ = ['SparseMatrix']

logger = logging.getLogger("recmat.sparse")


def _count_nonzero(values) -> int:
    """Count non-zeros of a numpy array or scipy sparse matrix."""
    if hasattr(values, 'count_nonzero'):
        return int(values.count_nonzero())
    return int(np.count_nonzero(values))


class SparseMatrix(MatrixBase):
    """
    Sparse matrix backed by a growing list of per-row dicts.

    Attributes:
        _row_list: One dict per allocated row (column index -> value).
        _num_rows: Declared number of rows.
        _num_columns: Declared number of columns.
        _dtype: numpy dtype used by ``to_dense`` / ``to_scipy``.

    Example:
        >>> mat = SparseMatrix(3, 4)
        >>> mat[2, 1] = 5
        >>> mat[2, 1], mat[0, 0]
        (5, 0)
        >>> mat.non_empty_rows
        [2]
    """

    def __init__(self, num_rows: int, num_columns: int, dtype=np.int64):
        self._num_rows = check_dimension(num_rows, "num_rows")
        self._num_columns = check_dimension(num_columns, "num_columns")
        self._dtype = np.dtype(dtype)
        self._row_list: List[Dict[int, Any]] = []

    @classmethod
    def _allocate(cls, num_rows: int, num_columns: int, dtype) -> 'SparseMatrix':
        """Construct an empty instance of ``cls`` for the given shape."""
        return cls(num_rows, num_columns, dtype=dtype)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def number_of_rows(self) -> int:
        return self._num_rows

    @property
    def number_of_columns(self) -> int:
        return self._num_columns

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def is_symmetric(self) -> bool:
        """True if the matrix is square and every stored (i, j) equals (j, i)."""
        if self._num_rows != self._num_columns:
            return False
        for i, row in enumerate(self._row_list):
            for j, value in row.items():
                if self._lookup(j, i) != value:
                    return False
        return True

    @property
    def non_empty_rows(self) -> List[int]:
        """Indices of the rows holding at least one stored entry."""
        return [i for i, row in enumerate(self._row_list) if row]

    @property
    def non_empty_entry_ids(self) -> List[Tuple[int, int]]:
        """Stored (row, column) pairs, ordered by row."""
        return [(i, j) for i, row in enumerate(self._row_list) for j in row]

    @property
    def number_of_non_empty_entries(self) -> int:
        """Number of stored entries."""
        return sum(len(row) for row in self._row_list)

    # =========================================================================
    # Storage Helpers
    # =========================================================================

    def _ensure_rows(self, row: int) -> None:
        """Grow the row list so that ``row`` is a valid position."""
        missing = row + 1 - len(self._row_list)
        if missing > 0:
            self._row_list.extend({} for _ in range(missing))
            logger.debug("Grew row storage by %d to %d rows",
                         missing, len(self._row_list))

    def _lookup(self, row: int, column: int) -> Any:
        """Stored value at (row, column), zero if absent."""
        if row < len(self._row_list):
            return self._row_list[row].get(column, 0)
        return 0

    def _store(self, row: int, column: int, value) -> None:
        self._ensure_rows(row)
        self._row_list[row][column] = value

    def _check_access(self, x: int, y: int) -> None:
        """Reject negative coordinates always, and out-of-shape ones in strict mode."""
        if x < 0 or y < 0:
            raise IndexOutOfBoundsError(
                f"negative index ({x}, {y}) for matrix of shape {self.shape}"
            )
        if config.strict_bounds:
            self._check_bounds(x, y)

    # =========================================================================
    # Element Access
    # =========================================================================

    def __getitem__(self, key) -> Any:
        x, y = _split_key(key)
        self._check_access(x, y)
        return self._lookup(x, y)

    def __setitem__(self, key, value) -> None:
        x, y = _split_key(key)
        self._check_access(x, y)
        self._store(x, y, value)

    # =========================================================================
    # Iteration
    # =========================================================================

    def iter_rows(self) -> Iterator[Tuple[int, Dict[int, Any]]]:
        """Iterate over non-empty rows, yielding (row_index, {column: value}).

        The yielded dicts are copies; mutating them does not touch the matrix.
        """
        for i, row in enumerate(self._row_list):
            if row:
                yield i, dict(row)

    def iter_entries(self) -> Iterator[Tuple[int, int, Any]]:
        for i, row in enumerate(self._row_list):
            for j, value in row.items():
                yield i, j, value

    # =========================================================================
    # Matrix Capability
    # =========================================================================

    def create_matrix(self, num_rows: int, num_columns: int) -> 'SparseMatrix':
        logger.debug("Creating %s of shape (%d, %d)",
                     type(self).__name__, num_rows, num_columns)
        return self._allocate(num_rows, num_columns, self._dtype)

    def transpose(self) -> 'SparseMatrix':
        transposed = SparseMatrix(self._num_columns, self._num_rows, dtype=self._dtype)
        for i, j, value in self.iter_entries():
            transposed._store(j, i, value)
        return transposed

    def resize(self, num_rows: int, num_columns: int) -> None:
        """Change the declared dimensions.

        Rows and columns beyond the new size are dropped from storage.
        Growing only updates the declared size; storage grows lazily.
        """
        num_rows = check_dimension(num_rows, "num_rows")
        num_columns = check_dimension(num_columns, "num_columns")

        del self._row_list[num_rows:]
        if num_columns < self._num_columns:
            for row in self._row_list:
                for j in [j for j in row if j >= num_columns]:
                    del row[j]

        self._num_rows = num_rows
        self._num_columns = num_columns

    def copy(self) -> 'SparseMatrix':
        """Create a deep copy with independent row storage."""
        duplicate = self._allocate(self._num_rows, self._num_columns, self._dtype)
        duplicate._row_list = [dict(row) for row in self._row_list]
        return duplicate

    # =========================================================================
    # Construction from numpy / scipy
    # =========================================================================

    @classmethod
    def _validate_layout(cls, values, transposed) -> None:
        """Hook for variants that only accept a particular structure."""

    @staticmethod
    def _stores_cell(x: int, y: int) -> bool:
        """Whether (x, y) is a physically stored cell of this variant."""
        return True

    @classmethod
    def from_dense(cls, values, dtype=None) -> 'SparseMatrix':
        """Create from a dense 2D array-like.

        Args:
            values: 2D list or numpy array
            dtype: Optional dtype override (default: dtype of ``values``)

        Returns:
            New matrix holding the non-zero entries of ``values``

        Example:
            >>> mat = SparseMatrix.from_dense([[1, 0, 2], [0, 3, 0]])
            >>> mat.shape
            (2, 3)
        """
        arr = np.asarray(values, dtype=dtype)
        if arr.ndim != 2:
            raise InvalidArgumentError(
                f"from_dense expects a 2D array, got {arr.ndim} dimensions"
            )
        cls._validate_layout(arr, arr.T)

        matrix = cls._allocate(arr.shape[0], arr.shape[1], arr.dtype)
        for x, y in zip(*np.nonzero(arr)):
            if not cls._stores_cell(x, y):
                continue
            matrix[int(x), int(y)] = arr[x, y].item()
        return matrix

    @classmethod
    def from_scipy(cls, mat: Union['spmatrix', Any]) -> 'SparseMatrix':
        """Create from a scipy sparse matrix (any format).

        Explicitly stored zeros are skipped; duplicates are summed.
        """
        try:
            import scipy.sparse as sp
        except ImportError:
            raise ImportError("scipy required for from_scipy()")

        csr = sp.csr_matrix(mat, copy=True)
        csr.sum_duplicates()
        csr.eliminate_zeros()
        cls._validate_layout(csr, csr.T)

        matrix = cls._allocate(csr.shape[0], csr.shape[1], csr.dtype)
        coo = csr.tocoo()
        for x, y, value in zip(coo.row, coo.col, coo.data):
            if not cls._stores_cell(x, y):
                continue
            matrix[int(x), int(y)] = value.item()
        return matrix

    # =========================================================================
    # Magic Methods
    # =========================================================================

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}("
                f"shape={self.shape}, stored={self.number_of_non_empty_entries})")
