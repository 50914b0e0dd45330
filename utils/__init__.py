"""Shared constants, logging and styling helpers."""
