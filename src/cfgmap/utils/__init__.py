"""Internal helpers for cfgmap."""
