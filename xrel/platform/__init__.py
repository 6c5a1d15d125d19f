"""Platform abstraction layer."""

from .files import atomic_target, atomic_write_text

__all__ = [
    "atomic_target",
    "atomic_write_text",
]
