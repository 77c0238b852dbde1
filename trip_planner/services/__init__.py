"""Upstream lookups with local fallbacks."""
