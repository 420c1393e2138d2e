"""Fixed-delay throttle for sequential upstream requests."""

import time
from typing import Callable, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


def throttled(
    items: Iterable[T],
    delay_seconds: float = 0.1,
    sleep: Optional[Callable[[float], None]] = None,
) -> Iterator[T]:
    """
    Yield items in order, pausing after each one so that the caller's
    per-item request is spaced from the next.

    Args:
        items (Iterable[T]): The items to iterate, e.g. ticker symbols.
        delay_seconds (float): Pause after each item. ``<= 0`` disables pausing.
        sleep (Optional[Callable[[float], None]]): Sleep function; defaults to ``time.sleep``.

    Yields:
        T: Each item of ``items``, unchanged and in order.
    """
    for item in items:
        yield item
        if delay_seconds > 0:
            (sleep or time.sleep)(delay_seconds)
