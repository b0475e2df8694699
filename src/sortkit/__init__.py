"""sortkit public package exports."""

from .bubble import sort_bubble
from .config import SortkitSettings, load_config, load_settings
from .insertion import sort_insertion
from .merge import MergeInvariantError, sort_merge
from .registry import ALGORITHMS, available_algorithms, get_algorithm

__all__ = [
    "ALGORITHMS",
    "MergeInvariantError",
    "SortkitSettings",
    "available_algorithms",
    "get_algorithm",
    "load_config",
    "load_settings",
    "sort_bubble",
    "sort_insertion",
    "sort_merge",
]
