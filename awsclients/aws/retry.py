"""
Retry policy of the request executor, built from botocore's standard retry mode: an error is retried if the outcome
marks it as retryable, or if botocore's standard conditions (transient, throttled or modeled retryable errors) apply,
as long as attempts are left. Delays use botocore's exponential backoff with jitter.
"""
import random
from typing import Callable

from botocore.retries.base import BaseRetryableChecker
from botocore.retries.standard import (
    ExponentialBackoff,
    MaxAttemptsChecker,
    OrRetryChecker,
    RetryContext,
    RetryPolicy,
    StandardRetryConditions,
)

from awsclients.constants import DEFAULT_MAX_ATTEMPTS, DEFAULT_RETRY_MAX_DELAY

# key of the AWSError of an attempt in the request context of a RetryContext
ERROR_CONTEXT_KEY = "awsclients_error"


class RetryableErrorChecker(BaseRetryableChecker):
    """Retries errors with ``AWSError.retryable`` set, as long as attempts are left."""

    def __init__(self, max_attempts: int):
        self._max_attempts_checker = MaxAttemptsChecker(max_attempts)

    def is_retryable(self, context: RetryContext) -> bool:
        error = context.request_context.get(ERROR_CONTEXT_KEY)
        if error is None or not error.retryable:
            return False
        return self._max_attempts_checker.is_retryable(context)


class RetryStrategy:
    """
    Decides whether a failed attempt is retried, and how long to wait before the next one. ``attempt_number`` of the
    context is 1-based, like in botocore.
    """

    def __init__(
        self,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        max_delay: float = DEFAULT_RETRY_MAX_DELAY,
        random: Callable[[], float] = random.random,
    ):
        self.max_attempts = max_attempts
        self.max_delay = max_delay
        self._policy = RetryPolicy(
            retry_checker=OrRetryChecker(
                [RetryableErrorChecker(max_attempts), StandardRetryConditions(max_attempts)]
            ),
            retry_backoff=ExponentialBackoff(max_backoff=max_delay, random=random),
        )

    def should_retry(self, context: RetryContext) -> bool:
        return self._policy.should_retry(context)

    def delay(self, context: RetryContext) -> float:
        return self._policy.compute_retry_delay(context)
