"""
Pytest configuration and shared fixtures for recmat tests.
"""

import pytest
import numpy as np
from pathlib import Path
import sys

# Add src to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root / "src"))

import recmat
from recmat import (
    SkewSymmetricSparseMatrix,
    SymmetricSparseMatrix,
    SparseMatrix,
    DenseMatrix,
)


# Try to import scipy
try:
    import scipy.sparse as sp
    HAS_SCIPY = True
except ImportError:
    HAS_SCIPY = False


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def reset_config():
    """Restore the global configuration after every test."""
    recmat.config.strict_bounds = False
    yield
    recmat.config.reset()
    recmat.config.strict_bounds = False


@pytest.fixture(scope="session")
def requires_scipy():
    """Skip test if scipy is not available."""
    if not HAS_SCIPY:
        pytest.skip("scipy not available")


@pytest.fixture
def skew_matrix():
    """Create a 4x4 skew-symmetric matrix.

    Matrix:
    [[ 0,  2,  0,  1],
     [-2,  0,  3,  0],
     [ 0, -3,  0,  0],
     [-1,  0,  0,  0]]
    """
    mat = SkewSymmetricSparseMatrix(4)
    mat[0, 1] = 2
    mat[1, 2] = 3
    mat[3, 0] = 1
    return mat


@pytest.fixture
def skew_dense():
    """Dense equivalent of ``skew_matrix``."""
    return np.array([
        [0, 2, 0, 1],
        [-2, 0, 3, 0],
        [0, -3, 0, 0],
        [-1, 0, 0, 0],
    ], dtype=np.int64)


@pytest.fixture
def small_sparse_matrix():
    """Create a small general sparse matrix (3x4).

    Matrix:
    [[1, 0, 2, 0],
     [0, 0, 0, 0],
     [5, 0, 0, 6]]
    """
    return SparseMatrix.from_dense([
        [1, 0, 2, 0],
        [0, 0, 0, 0],
        [5, 0, 0, 6],
    ])


@pytest.fixture(params=["sparse", "skew", "symmetric", "dense"])
def any_square_matrix(request):
    """One empty 4x4 instance of every matrix variant."""
    factories = {
        "sparse": lambda: SparseMatrix(4, 4),
        "skew": lambda: SkewSymmetricSparseMatrix(4),
        "symmetric": lambda: SymmetricSparseMatrix(4),
        "dense": lambda: DenseMatrix(4, 4),
    }
    return factories[request.param]()
