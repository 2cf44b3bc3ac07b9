"""Visualization module for sketches.

This module renders static floor plan images of a level.
"""

from .generator import generate_sketch_image

__all__ = ["generate_sketch_image"]
