"""Synthetic acceleration profile generation."""

from .generate_profile import DEFAULT_COLUMN, generate_acceleration_profile, write_profile_csv
from .profile_params import DEFAULT_PROFILE, ProfileParams

__all__ = [
    "DEFAULT_COLUMN",
    "DEFAULT_PROFILE",
    "ProfileParams",
    "generate_acceleration_profile",
    "write_profile_csv",
]
