"""
Personal task tracker: a REST backend for per-user task lists.
"""

__version__ = "1.0.0"
