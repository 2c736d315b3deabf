"""Feature packages for island-limits."""
