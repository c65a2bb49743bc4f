"""Core algorithms for geoanalyzer.

This module contains:

- Metric primitives (distance, slope, tolerance-based equality)
- Shape classifiers (line, triangle, quadrilateral, circle)
- Grid rendering (bounding boxes, rasterization to text)
- Analysis orchestration (classify, render, log)

Classifiers and the renderer are:
- Stateless (no shared state between requests)
- Pure (no I/O, no side effects)

Key functions:
- distance, slope, approx_equal: Metric primitives
- analyze_line, analyze_triangle, analyze_quadrilateral, analyze_circle: Classifiers
- points_bounding_box, circle_bounding_box: Plot extents
- render_points, render_circle: Text grids

Key classes:
- GridRenderer: Configurable rasterizer
- ShapeAnalyzer: Classifies and plots figures, logging each request
"""

from geoanalyzer.core.analyzer import Analysis, ShapeAnalyzer
from geoanalyzer.core.classifiers import (
    analyze_circle,
    analyze_line,
    analyze_quadrilateral,
    analyze_triangle,
)
from geoanalyzer.core.metrics import EPSILON, approx_equal, distance, slope
from geoanalyzer.core.renderer import (
    GridRenderer,
    circle_bounding_box,
    points_bounding_box,
    render_circle,
    render_points,
)

__all__ = [
    # Analyzer classes
    "Analysis",
    "ShapeAnalyzer",
    # Renderer
    "GridRenderer",
    "circle_bounding_box",
    "points_bounding_box",
    "render_circle",
    "render_points",
    # Classifiers
    "analyze_circle",
    "analyze_line",
    "analyze_quadrilateral",
    "analyze_triangle",
    # Metric primitives
    "EPSILON",
    "approx_equal",
    "distance",
    "slope",
]
