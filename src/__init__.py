"""Sukuk portfolio metrics engine."""
