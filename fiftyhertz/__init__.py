"""
50Hertz agricultural advisory backend
"""
__version__ = "1.0.0"
