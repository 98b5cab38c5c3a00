"""Validity checks shared by the circuit and space query libraries.

Host references are borrowed: they can be destroyed between two calls within
the same tick, so every query re-checks them here instead of trusting an
earlier observation. Reading an attribute from a destroyed host object may
raise; that is mapped to "invalid" / the supplied default.
"""
import logging
from typing import Any

logger = logging.getLogger(__name__)


def safe_attr(ref: Any, name: str, default: Any = None) -> Any:
    """Read ``ref.name``, returning ``default`` if it is missing or unreadable."""
    if ref is None:
        return default
    try:
        return getattr(ref, name, default)
    except Exception as e:
        logger.debug(f"Reading {name!r} from {type(ref).__name__} failed: {e}")
        return default


def is_valid(ref: Any) -> bool:
    """True iff ``ref`` is present and its ``valid`` flag is set."""
    return bool(safe_attr(ref, "valid", False))
