"""
Shared helpers for entry points.
"""
