"""Bank statement dashboard package."""
