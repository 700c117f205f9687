"""Template and unit constants."""

DEFAULT_FORMAT = "%r%h:%i:%s"
"""Canonical template: sign only when negative, e.g. ``-00:01:30``."""

TIME_WITH_SIGN_FORMAT = "%R%h:%i:%s"
"""Template that always carries a sign, e.g. ``+00:01:30``."""

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
MINUTES_PER_HOUR = 60

TEMPLATE_CACHE_SIZE = 128
"""Number of tokenized/compiled templates kept in memory."""
