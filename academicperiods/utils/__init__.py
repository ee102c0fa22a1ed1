"""Shared utilities for academicperiods package."""

from academicperiods.utils.dataloader import (
    find_data_file,
    load_yaml_file,
    format_not_found_error,
)
from academicperiods.utils.normalize import normalize_text

__all__ = [
    # Data loading
    "find_data_file",
    "load_yaml_file",
    "format_not_found_error",

    # Text normalization
    "normalize_text",
]
