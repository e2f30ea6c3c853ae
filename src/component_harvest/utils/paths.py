"""Path segment sanitizing and component identity."""

import hashlib
import re

_UNSAFE_CHARS = re.compile(r"[^\w.]")
_SEPARATOR = "_"
_RELATIVE_SEGMENTS = frozenset({".", ".."})


def sanitize(text: str) -> str:
    """Turn an arbitrary title into a safe, lowercase path segment.

    Every character outside ``[\\w.]`` becomes ``_`` and leading/trailing
    underscores are stripped, so ``sanitize(sanitize(x)) == sanitize(x)``.
    An all-punctuation title yields ``""``.
    """
    return _UNSAFE_CHARS.sub(_SEPARATOR, text.lower()).strip(_SEPARATOR)


def require_segment(text: str) -> str:
    """Sanitize ``text``, rejecting results that are empty or name a relative directory."""
    segment = sanitize(text)
    if not segment:
        raise ValueError("title has no usable path characters")
    if segment in _RELATIVE_SEGMENTS:
        raise ValueError(f"title sanitizes to the relative path segment {segment!r}")
    return segment


def component_hash(logical_path: str) -> str:
    """Return the SHA-1 hex digest identifying a component's logical path."""
    return hashlib.sha1(logical_path.encode("utf-8")).hexdigest()
