"""Spam likelihood derived from report counts."""

from callerid.core.constants import MAX_SPAM_LIKELIHOOD, SPAM_POINTS_PER_REPORT, SPAM_THRESHOLD


def spam_likelihood(report_count: int) -> int:
    """Bounded 0-100 likelihood: 10 points per report, capped at 100."""
    return min(max(report_count, 0) * SPAM_POINTS_PER_REPORT, MAX_SPAM_LIKELIHOOD)


def is_spam(likelihood: int) -> bool:
    return likelihood > SPAM_THRESHOLD
