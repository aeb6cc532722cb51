"""
Bounded retry policy for provider calls.

The policy wraps a single-attempt callable. Every failed attempt is logged;
after the last attempt the final exception is re-raised unchanged.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """
    Retry a callable up to max_attempts times.

    Attributes:
        max_attempts: Total number of attempts (>= 1)
        backoff_seconds: Pause between attempts (0 means retry immediately)
    """
    max_attempts: int = 3
    backoff_seconds: float = 0.0

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {self.max_attempts}")
        if self.backoff_seconds < 0:
            raise ValueError(f"backoff_seconds must be >= 0, got {self.backoff_seconds}")

    def run(self, fn: Callable[[], T], description: str = "operation") -> T:
        """
        Call fn until it succeeds or attempts are exhausted.

        Args:
            fn: Zero-argument callable performing one attempt
            description: Label used in log messages

        Returns:
            The first successful result of fn

        Raises:
            Exception: The exception raised by the last attempt
        """
        for attempt in range(1, self.max_attempts + 1):
            try:
                return fn()
            except Exception as e:
                logger.warning("Attempt %d/%d failed for %s: %s", attempt, self.max_attempts, description, e)
                if attempt == self.max_attempts:
                    raise
                if self.backoff_seconds:
                    time.sleep(self.backoff_seconds)
        # Unreachable: the loop either returns or re-raises on the last attempt
        raise RuntimeError(f"Failed {description} after {self.max_attempts} attempts.")


SINGLE_ATTEMPT = RetryPolicy(max_attempts=1)
