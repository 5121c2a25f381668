"""
Hopper

Singers demo API backed by Cloud Spanner.
"""
__version__ = "1.0.0"
