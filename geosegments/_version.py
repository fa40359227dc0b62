"""
Exposes the version of geosegments
"""

__version__ = 'v0.1.0'
