from contact_inbox.guard.checks import SubmissionChecker
from contact_inbox.guard.rate_limiter import SlidingWindowRateLimiter

__all__ = ["SubmissionChecker", "SlidingWindowRateLimiter"]
