"""Profile and code map resources."""

from .loader import (
    DEFAULT_LANGUAGES,
    find_code_map,
    load_code_map,
    load_profile_store,
    read_profile,
    resolve_profile_path,
)

__all__ = [
    "DEFAULT_LANGUAGES",
    "find_code_map",
    "load_code_map",
    "load_profile_store",
    "read_profile",
    "resolve_profile_path",
]
