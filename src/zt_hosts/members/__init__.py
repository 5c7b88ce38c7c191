"""ZeroTier Central member API access."""
