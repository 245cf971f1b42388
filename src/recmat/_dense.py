"""
Dense Matrix

DenseMatrix wraps a 2D numpy array. Unlike the sparse variants it allocates
its full shape up front, so indexing is always strict: coordinates outside
the shape raise IndexOutOfBoundsError regardless of configuration.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Tuple

import numpy as np

from ._base import MatrixBase, _split_key
from ._errors import InvalidArgumentError, check_dimension, check_index

__all__ = ['DenseMatrix']

logger = logging.getLogger("recmat.dense")


class DenseMatrix(MatrixBase):
    """
    Dense matrix backed by a numpy array.

    Args:
        num_rows: Number of rows
        num_columns: Number of columns
        dtype: numpy dtype of the elements (default int64)

    Example:
        >>> mat = DenseMatrix(2, 3)
        >>> mat[1, 2] = 7
        >>> mat.to_dense()
        array([[0, 0, 0],
               [0, 0, 7]])
    """

    def __init__(self, num_rows: int, num_columns: int, dtype=np.int64):
        num_rows = check_dimension(num_rows, "num_rows")
        num_columns = check_dimension(num_columns, "num_columns")
        self._data = np.zeros((num_rows, num_columns), dtype=dtype)

    @classmethod
    def from_numpy(cls, array, copy: bool = True) -> 'DenseMatrix':
        """Wrap (or copy) a 2D numpy array.

        Args:
            array: 2D array-like
            copy: If False and ``array`` is already an ndarray, share its memory
        """
        arr = np.array(array, copy=True) if copy else np.asarray(array)
        if arr.ndim != 2:
            raise InvalidArgumentError(
                f"from_numpy expects a 2D array, got {arr.ndim} dimensions"
            )
        matrix = cls.__new__(cls)
        matrix._data = arr
        return matrix

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def number_of_rows(self) -> int:
        return self._data.shape[0]

    @property
    def number_of_columns(self) -> int:
        return self._data.shape[1]

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def is_symmetric(self) -> bool:
        if self.number_of_rows != self.number_of_columns:
            return False
        return bool(np.array_equal(self._data, self._data.T))

    # =========================================================================
    # Element Access
    # =========================================================================

    def __getitem__(self, key) -> Any:
        x, y = _split_key(key)
        self._check_bounds(x, y)
        return self._data[x, y].item()

    def __setitem__(self, key, value) -> None:
        x, y = _split_key(key)
        self._check_bounds(x, y)
        if np.issubdtype(self._data.dtype, np.integer):
            value = check_index(value, "value")
        self._data[x, y] = value

    def iter_entries(self) -> Iterator[Tuple[int, int, Any]]:
        for x, y in zip(*np.nonzero(self._data)):
            yield int(x), int(y), self._data[x, y].item()

    # =========================================================================
    # Matrix Capability
    # =========================================================================

    def create_matrix(self, num_rows: int, num_columns: int) -> 'DenseMatrix':
        logger.debug("Creating DenseMatrix of shape (%d, %d)", num_rows, num_columns)
        return type(self)(num_rows, num_columns, dtype=self._data.dtype)

    def transpose(self) -> 'DenseMatrix':
        return type(self).from_numpy(self._data.T)

    def resize(self, num_rows: int, num_columns: int) -> None:
        """Change the shape, keeping the overlapping block and zero-filling the rest."""
        num_rows = check_dimension(num_rows, "num_rows")
        num_columns = check_dimension(num_columns, "num_columns")
        resized = np.zeros((num_rows, num_columns), dtype=self._data.dtype)
        keep_rows = min(num_rows, self.number_of_rows)
        keep_cols = min(num_columns, self.number_of_columns)
        resized[:keep_rows, :keep_cols] = self._data[:keep_rows, :keep_cols]
        self._data = resized

    def copy(self) -> 'DenseMatrix':
        return type(self).from_numpy(self._data)

    def to_dense(self) -> np.ndarray:
        return self._data.copy()
