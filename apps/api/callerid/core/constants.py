"""Shared API constants."""

# Each spam report adds this many points to a number's spam likelihood
SPAM_POINTS_PER_REPORT = 10
MAX_SPAM_LIKELIHOOD = 100
# A number is flagged as spam strictly above this likelihood
SPAM_THRESHOLD = 50

GENERIC_ERROR_DETAIL = "Something went wrong. Please try again later."
