"""
Utility helpers shared across vt.
"""
