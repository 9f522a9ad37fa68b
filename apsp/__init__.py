"""Public package exports for :mod:`apsp`."""

from __future__ import annotations

from .bellman_ford import bellman_ford
from .config import SolverConfig
from .dijkstra import dijkstra
from .exceptions import (
    AlgorithmError,
    APSPError,
    ConfigError,
    GraphError,
    InputError,
    NegativeWeightCycleError,
)
from .generator import GeneratedGraph, generate_graph, with_negative_cycle
from .graph import Graph
from .johnson import ShortestPathTree, johnson
from .logger import Logger, NoopLogger, StdLogger
from .matrix import johnson_matrix, to_numpy
from .path import reconstruct_path
from .relax import Relaxation, RelaxMode
from .vertex import INFINITY, Vertex

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "Vertex",
    "INFINITY",
    "Relaxation",
    "RelaxMode",
    "SolverConfig",
    "ShortestPathTree",
    "bellman_ford",
    "dijkstra",
    "johnson",
    "johnson_matrix",
    "to_numpy",
    "reconstruct_path",
    "GeneratedGraph",
    "generate_graph",
    "with_negative_cycle",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "APSPError",
    "InputError",
    "GraphError",
    "ConfigError",
    "AlgorithmError",
    "NegativeWeightCycleError",
]
