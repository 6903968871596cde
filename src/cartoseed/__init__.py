"""cartoseed top-level API.

External users can simply ``from cartoseed import sample``.
"""

from .api import (
    build_grid,
    build_neighbor_index,
    generate_candidates,
    sample,
    sample_from_config,
    sample_result,
)
from .errors import CartoseedError, InvalidDomain, InvalidParameter
from .geometry import Domain

__all__ = [
    "sample",
    "sample_result",
    "sample_from_config",
    "build_grid",
    "build_neighbor_index",
    "generate_candidates",
    "Domain",
    "CartoseedError",
    "InvalidDomain",
    "InvalidParameter",
]
