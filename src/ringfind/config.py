"""Default parameters shared by the CLI and the Python API."""

from .parameters import RingSearchOptions

_DEFAULT_OPTIONS = RingSearchOptions()

DEFAULT_PARAMS = {
    # Ring search
    "all": _DEFAULT_OPTIONS.all,
    "min": _DEFAULT_OPTIONS.min_size,
    "max": _DEFAULT_OPTIONS.max_size,
    "size": _DEFAULT_OPTIONS.size,
    "mirror": _DEFAULT_OPTIONS.mirror,
    # Output
    "aromaticity": False,
    "json": False,
    "debug": False,
}
