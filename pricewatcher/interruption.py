"""Reacting to termination signals."""

from __future__ import annotations

import signal
from typing import Callable


def watch_for_interruption(*cancels: Callable[[], object]) -> None:
    """Call every function in ``cancels`` once on the first SIGINT or SIGTERM."""
    fired = False

    def _handler(signum, frame):
        nonlocal fired
        if fired:
            return
        fired = True
        for cancel in cancels:
            cancel()

    for sig in (signal.SIGINT, signal.SIGTERM):
        signal.signal(sig, _handler)