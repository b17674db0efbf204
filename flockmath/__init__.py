"""Vector and matrix helpers, texture-unit bookkeeping and a boids flocking model."""

__version__ = "0.1.0"