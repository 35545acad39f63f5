"""Activity feed app: notification grouping, formatting and read-state."""
