"""Samplers and the spatial indices they share."""
from .candidates import generate_candidates
from .grid import Grid, build_grid
from .inhibition import sequential_inhibition
from .neighbors import NeighborIndex, build_neighbor_index
from .poisson import SamplerState, poisson_disk_sample
from .result import AcceptedPoint, SampleResult

__all__ = [
    "AcceptedPoint",
    "Grid",
    "NeighborIndex",
    "SampleResult",
    "SamplerState",
    "build_grid",
    "build_neighbor_index",
    "generate_candidates",
    "poisson_disk_sample",
    "sequential_inhibition",
]
