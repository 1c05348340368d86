"""Clock helpers.

Cache freshness is measured in milliseconds on the monotonic clock so
wall-clock adjustments never make a snapshot look younger or older than
it is.
"""

from __future__ import annotations

import time
from collections.abc import Callable

Clock = Callable[[], float]


def monotonic_ms() -> float:
    """Return the monotonic clock reading in milliseconds."""
    return time.monotonic() * 1000.0
