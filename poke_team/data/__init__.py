"""Static game data."""
