"""
Configuration access for vt.
"""
