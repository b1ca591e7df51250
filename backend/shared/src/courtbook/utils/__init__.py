"""Utility helpers for money arithmetic and logging."""
