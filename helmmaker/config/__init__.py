"""Application set loading."""
from helmmaker.config.loader import (
    default_application_set,
    dump_application_set,
    load_application_set,
)
from helmmaker.core.errors import ApplicationSetError

__all__ = [
    'ApplicationSetError',
    'default_application_set',
    'dump_application_set',
    'load_application_set',
]
