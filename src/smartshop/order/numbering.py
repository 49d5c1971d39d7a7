"""Order number issuance.

Order numbers combine the moment this process started with a sequence that
only ever moves forward, so numbers never repeat within a process and sort
in placement order.
"""

import itertools
import time

_PROCESS_STARTED_MS = int(time.time() * 1000)
_sequence = itertools.count(1)


def next_order_id() -> str:
    return f"ORD-{_PROCESS_STARTED_MS}-{next(_sequence):06d}"
