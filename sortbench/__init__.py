"""Timing of selection and Shell sorts on vectors and 3D arrays."""

__version__ = "0.1.0"