"""Exceptions raised by the mesh generation pipeline."""


class QuadMapError(Exception):
    """Base class for all quadmap errors."""


class InvalidConfigurationError(QuadMapError, ValueError):
    """Generation parameters were rejected before generation started."""


class MeshConsistencyError(QuadMapError, RuntimeError):
    """
    The mesh violated an internal invariant.

    Raised for faces referencing missing vertices, asymmetric adjacency
    or non-quad faces after subdivision. Not recoverable: generation is
    aborted.
    """
