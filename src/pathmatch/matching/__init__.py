"""Matching — the stateless single-pass matcher and the stateful cursor."""
