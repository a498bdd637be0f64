"""HTTP API for mesh generation."""
