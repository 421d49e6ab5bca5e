from __future__ import annotations

from numbers import Real
from typing import Any


def is_real_number(value: Any) -> bool:
    """
    Check whether ``value`` is an acceptable numeric observation.

    Booleans are rejected even though ``bool`` subclasses ``int``.
    numpy scalars register as ``numbers.Real`` and are accepted.
    """
    return isinstance(value, Real) and not isinstance(value, bool)


def sorted_items(groups: dict[str, Any]) -> list[tuple[str, Any]]:
    """Deterministic (key-sorted) view of a dict."""
    return [(k, groups[k]) for k in sorted(groups.keys())]
