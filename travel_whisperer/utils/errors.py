# server-side error taxonomy shared by both endpoints
from enum import Enum
from typing import Optional

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again in a moment."
PAYMENT_REQUIRED_MESSAGE = "Payment required. Please add credits to your workspace."
MISSING_API_KEY_MESSAGE = "AI gateway API key is not configured"


class TravelWhispererError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ConfigurationError(TravelWhispererError):
    status_code = 500
    default_message = MISSING_API_KEY_MESSAGE


class UpstreamRateLimited(TravelWhispererError):
    status_code = 429
    default_message = RATE_LIMIT_MESSAGE


class UpstreamPaymentRequired(TravelWhispererError):
    status_code = 402
    default_message = PAYMENT_REQUIRED_MESSAGE


class UpstreamCallFailed(TravelWhispererError):
    status_code = 500
    default_message = "Upstream call failed"


class RequestValidationFailed(TravelWhispererError):
    status_code = 400
    default_message = "Invalid request body"


class UpstreamOutcome(str, Enum):
    OK = "ok"
    RATE_LIMITED = "rate_limited"
    PAYMENT_REQUIRED = "payment_required"
    FAILED = "failed"

    @classmethod
    def from_status(cls, status_code: int) -> "UpstreamOutcome":
        if 200 <= status_code < 300:
            return cls.OK
        if status_code == 429:
            return cls.RATE_LIMITED
        if status_code == 402:
            return cls.PAYMENT_REQUIRED
        return cls.FAILED


_OUTCOME_ERRORS = {
    UpstreamOutcome.RATE_LIMITED: UpstreamRateLimited,
    UpstreamOutcome.PAYMENT_REQUIRED: UpstreamPaymentRequired,
    UpstreamOutcome.FAILED: UpstreamCallFailed,
}


def raise_for_outcome(outcome: UpstreamOutcome, failure_message: Optional[str] = None) -> None:
    """
    Raise the caller-facing error for a non-OK upstream outcome.
    Rate-limit and payment errors always carry their fixed messages;
    `failure_message` only applies to the generic FAILED outcome.
    """
    if outcome is UpstreamOutcome.OK:
        return
    error_cls = _OUTCOME_ERRORS[outcome]
    if error_cls is UpstreamCallFailed:
        raise error_cls(failure_message)
    raise error_cls()
