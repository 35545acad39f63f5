"""Tuning values for the notification feed."""

# Records requested per store page
PAGE_SIZE = 20

# Pull-to-refresh: drag past this distance and release to refresh
PULL_REFRESH_THRESHOLD = 60
PULL_DISTANCE_MAX = 100

# Infinite scroll: load more when this close to the bottom
SCROLL_LOOKAHEAD_MARGIN = 100

# Grouping keys
FOLLOWED_GROUP_KEY = "followed"
UNKNOWN_SUBJECT = "unknown"

THING_TITLE_FALLBACK = "an item"
