"""Configuration loading utilities."""
from .loader import deep_update, load_config
from .schema import ProfileSampling, SamplingConfig

__all__ = ["load_config", "deep_update", "SamplingConfig", "ProfileSampling"]
