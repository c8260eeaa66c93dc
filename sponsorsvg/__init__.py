"""
Render a sponsors.json list into an SVG grid of circular, linked avatars.
"""

__version__ = "0.1.0"
