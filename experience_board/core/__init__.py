"""
Core module - configuration, auth, errors and logging setup.
"""
