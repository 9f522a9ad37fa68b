"""Distance-matrix assembly from Johnson results."""

from __future__ import annotations

from typing import Dict, List, Mapping, Sequence, Tuple

import numpy as np
import numpy.typing as npt

from .exceptions import InputError
from .vertex import Distance, Label, Vertex


def johnson_matrix(
    results: Sequence[Mapping[Label, Vertex]],
    sources: Sequence[Label],
) -> Dict[Label, Dict[Label, Distance]]:
    """Return ``matrix[source][target]`` distances.

    Args:
        results: Per-source shortest-path trees as returned by
            :func:`~apsp.johnson.johnson`.
        sources: Source label of each entry of ``results``, in order.

    Raises:
        InputError: If ``results`` and ``sources`` differ in length.
    """
    if len(results) != len(sources):
        raise InputError(f"{len(results)} results but {len(sources)} sources")
    return {
        s: {label: vertex.weight for label, vertex in tree.items()}
        for s, tree in zip(sources, results)
    }


def to_numpy(
    results: Sequence[Mapping[Label, Vertex]],
    sources: Sequence[Label],
) -> Tuple[List[Label], npt.NDArray[np.float64]]:
    """Return the distance matrix as a dense NumPy array.

    Rows and columns both follow ``sources``. Unreachable pairs hold
    ``inf``.

    Returns:
        A tuple ``(labels, D)`` with ``D[i, j]`` the distance from
        ``labels[i]`` to ``labels[j]``.
    """
    matrix = johnson_matrix(results, sources)
    labels = list(sources)
    index = {label: i for i, label in enumerate(labels)}
    D = np.full((len(labels), len(labels)), np.inf, dtype=np.float64)
    for s, row in matrix.items():
        i = index[s]
        for t, d in row.items():
            if t in index:
                D[i, index[t]] = float(d)
    return labels, D


__all__ = ["johnson_matrix", "to_numpy"]
