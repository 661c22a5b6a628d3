from .bilinear import bilinear, interpolate_points
