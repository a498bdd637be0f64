"""Quad-dominant planar mesh generation over a hexagonal lattice."""

__version__ = "0.1.0"
