"""Core infrastructure for respath."""
