"""Geoanalyzer - Classify planar figures and plot them on a text grid.

Geoanalyzer is a CLI tool that takes raw point coordinates, classifies the
figure they describe (line segment, triangle, quadrilateral or circle),
computes its metrics and draws an ASCII visualization around the origin.

Example:
    $ geoanalyzer triangle --p1 0 0 --p2 3 0 --p3 0 4

This reports a right-angled scalene triangle with area 6.00 and plots its
three vertices.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
