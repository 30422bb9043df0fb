"""Shared test helpers for hashtree."""
