"""
Snap Share API.

REST service for photographers, their folders, albums and photos.
"""

__version__ = "1.0.0"
