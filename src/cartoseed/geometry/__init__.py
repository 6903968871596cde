"""Geometry collaborators: the sampling domain and shape primitives."""
from .domain import Domain, as_domain, validate_domain
from .primitives import annulus, disk, footprints_touch

__all__ = ["Domain", "as_domain", "validate_domain", "annulus", "disk", "footprints_touch"]
