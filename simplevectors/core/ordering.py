"""
Experimental lexicographic ordering between vectors.

Vectors of fewer dimensions sort first. Vectors of the same dimension compare
component by component from the left and the first difference decides.
Equality (``==``) is unaffected by anything in this module.

The ``<``, ``<=``, ``>``, ``>=`` operators on vectors delegate to ``compare``
only while ``VectorConfig.experimental_compare`` is enabled.
"""

import numpy as np


def compare(a, b) -> int:
    """
    Three-way lexicographic comparison of two vectors.

    Parameters
    ----------
    a : Vector
        Left vector, any dimension and dtype.
    b : Vector
        Right vector, any dimension and dtype.

    Returns
    -------
    result : int
        -1 if ``a`` sorts first, 1 if ``b`` sorts first, 0 if they are equal.
    """
    if a.dimensions != b.dimensions:
        return -1 if a.dimensions < b.dimensions else 1

    left = np.asarray(a.array)
    right = np.asarray(b.array)
    differs = np.flatnonzero(left != right)
    if differs.size == 0:
        return 0

    first = differs[0]
    return -1 if left[first] < right[first] else 1


def sort_key(v) -> tuple:
    """Key function for ``sorted`` that follows the ``compare`` ordering."""
    return (v.dimensions, tuple(np.asarray(v.array).tolist()))
