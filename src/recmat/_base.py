"""
Matrix Base Class

This module defines the abstract base class for the recmat matrix types.
It establishes the capability that generic matrix-consuming algorithms
(for example item-item recommenders) rely on, without knowing the concrete
storage variant.

Type Hierarchy:

    MatrixBase (ABC)
    ├── SparseMatrix                  # Growing list of per-row dicts
    │   ├── SkewSymmetricSparseMatrix # Stores row < column only, M[y, x] = -M[x, y]
    │   └── SymmetricSparseMatrix     # Stores row <= column only, M[y, x] = M[x, y]
    └── DenseMatrix                   # numpy 2D array

Design Philosophy:

1. Unified Interface: every variant supports indexed get/set, its declared
   dimensions, a symmetry query, transposition and resizing.

2. Shape Cloning: ``create_matrix`` produces an empty matrix of the same
   concrete type, so algorithms can allocate results without a static type.

3. Interoperability: every variant converts to numpy and scipy.

Example:

    def cooccurrence(source: MatrixBase) -> MatrixBase:
        result = source.create_matrix(source.number_of_rows,
                                      source.number_of_columns)
        ...
        return result
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, Tuple, TYPE_CHECKING

import numpy as np

from ._errors import IndexOutOfBoundsError, check_index

if TYPE_CHECKING:
    from scipy.sparse import spmatrix

__all__ = [
    'MatrixBase',
    'is_matrix_like',
]


def _split_key(key) -> Tuple[int, int]:
    """Unpack an ``[x, y]`` subscript into two ints."""
    if not isinstance(key, tuple) or len(key) != 2:
        raise TypeError(
            f"matrix indices must be a pair of integers, got {key!r}"
        )
    return check_index(key[0], "row index"), check_index(key[1], "column index")


class MatrixBase(ABC):
    """
    Abstract base class for all recmat matrices.

    Required Properties (subclasses must implement):
        number_of_rows: Declared number of rows
        number_of_columns: Declared number of columns
        is_symmetric: Whether M[x, y] == M[y, x] for all x, y

    Required Methods (subclasses must implement):
        __getitem__((x, y)): Read one element
        __setitem__((x, y), value): Write one element
        create_matrix(num_rows, num_columns): Empty matrix of the same type
        transpose(): New transposed matrix
        resize(num_rows, num_columns): Change the declared dimensions
        iter_entries(): Yield stored entries as (x, y, value)
    """

    # =========================================================================
    # Abstract Properties
    # =========================================================================

    @property
    @abstractmethod
    def number_of_rows(self) -> int:
        """Declared number of rows."""
        ...

    @property
    @abstractmethod
    def number_of_columns(self) -> int:
        """Declared number of columns."""
        ...

    @property
    @abstractmethod
    def is_symmetric(self) -> bool:
        """True if the matrix equals its transpose."""
        ...

    # =========================================================================
    # Abstract Methods
    # =========================================================================

    @abstractmethod
    def __getitem__(self, key) -> Any:
        ...

    @abstractmethod
    def __setitem__(self, key, value) -> None:
        ...

    @abstractmethod
    def create_matrix(self, num_rows: int, num_columns: int) -> 'MatrixBase':
        """Create an empty matrix of the same concrete type.

        Args:
            num_rows: Number of rows of the new matrix
            num_columns: Number of columns of the new matrix

        Returns:
            New, empty matrix
        """
        ...

    @abstractmethod
    def transpose(self) -> 'MatrixBase':
        """Return a new matrix holding the transpose of this one."""
        ...

    @abstractmethod
    def resize(self, num_rows: int, num_columns: int) -> None:
        """Change the declared dimensions in place."""
        ...

    @abstractmethod
    def iter_entries(self) -> Iterator[Tuple[int, int, Any]]:
        """Yield every logical entry that is backed by storage.

        Half-storage variants yield both mirrored coordinates of each
        stored cell; the diagonal is yielded once.
        """
        ...

    # =========================================================================
    # Derived Properties
    # =========================================================================

    @property
    def shape(self) -> Tuple[int, int]:
        """Matrix dimensions (rows, cols)."""
        return self.number_of_rows, self.number_of_columns

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self.number_of_rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self.number_of_columns

    @property
    def ndim(self) -> int:
        """Number of dimensions (always 2)."""
        return 2

    @property
    def size(self) -> int:
        """Total number of elements (rows * cols)."""
        return self.number_of_rows * self.number_of_columns

    @property
    def dtype(self) -> np.dtype:
        """numpy dtype used when materializing."""
        return np.dtype(np.int64)

    # =========================================================================
    # Element Access
    # =========================================================================

    def get(self, x: int, y: int) -> Any:
        """Read element (x, y). Same as ``matrix[x, y]``."""
        return self[x, y]

    def set(self, x: int, y: int, value) -> None:
        """Write element (x, y). Same as ``matrix[x, y] = value``."""
        self[x, y] = value

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.number_of_rows and 0 <= y < self.number_of_columns):
            raise IndexOutOfBoundsError(
                f"index ({x}, {y}) is out of bounds for matrix of shape {self.shape}"
            )

    # =========================================================================
    # Conversion
    # =========================================================================

    def to_dense(self) -> np.ndarray:
        """Convert to dense numpy array.

        Raises:
            IndexOutOfBoundsError: If storage holds entries outside the
                declared shape (possible after lenient writes)
        """
        dense = np.zeros(self.shape, dtype=self.dtype)
        for x, y, value in self.iter_entries():
            self._check_bounds(x, y)
            dense[x, y] = value
        return dense

    def to_scipy(self) -> 'spmatrix':
        """Convert to scipy.sparse.csr_matrix.

        Raises:
            ImportError: If scipy is not installed
        """
        try:
            import scipy.sparse as sp
        except ImportError:
            raise ImportError("scipy required for to_scipy()")

        row_ids, col_ids, values = [], [], []
        for x, y, value in self.iter_entries():
            self._check_bounds(x, y)
            row_ids.append(x)
            col_ids.append(y)
            values.append(value)

        coo = sp.coo_matrix(
            (np.asarray(values, dtype=self.dtype),
             (np.asarray(row_ids, dtype=np.int64), np.asarray(col_ids, dtype=np.int64))),
            shape=self.shape,
        )
        return coo.tocsr()

    # =========================================================================
    # Magic Methods
    # =========================================================================

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(shape={self.shape})"

    def __len__(self) -> int:
        """Return number of rows."""
        return self.number_of_rows


def is_matrix_like(obj) -> bool:
    """Check whether ``obj`` offers the matrix capability (duck typing)."""
    if isinstance(obj, MatrixBase):
        return True
    required = ('number_of_rows', 'number_of_columns', 'is_symmetric',
                'create_matrix', '__getitem__', '__setitem__')
    return all(hasattr(obj, name) for name in required)
