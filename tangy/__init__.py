"""Layout geometry: bounding boxes, directions and anchors, object fitting and lanes."""

__version__ = "0.1.0"