"""Utility helpers for scd-access."""
