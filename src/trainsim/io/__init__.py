"""Sample loading and profile export."""

from .csv_reader import load_samples_csv
from .profile_io import build_profile_dataset, read_profile_netcdf, write_profile_netcdf

__all__ = [
    "load_samples_csv",
    "build_profile_dataset",
    "read_profile_netcdf",
    "write_profile_netcdf",
]
