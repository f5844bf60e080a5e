from __future__ import annotations

import time


def now_timestamp() -> int:
    """Current unix time in whole seconds.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return int(time.time())
