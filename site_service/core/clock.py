"""Time sources, injectable so tests can pin them"""

import time
from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]
MillisClock = Callable[[], int]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def current_millis() -> int:
    return int(time.time() * 1000)
