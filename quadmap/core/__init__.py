"""
Core mesh generation functionality.
"""

from .errors import QuadMapError, InvalidConfigurationError, MeshConsistencyError
from .mesh import Mesh, VertexKind
from .alea_prng import AleaPRNG
from .lattice import build_lattice, vertex_index, lattice_vertex_count
from .triangulation import triangulate
from .quad_merge import merge_triangles
from .subdivision import subdivide
from .adjacency import index_adjacency, verify_adjacency, verify_quad_mesh
from .relaxation import relax, relax_vertex
from .graph_export import export_graph
from .mesh_analysis import MeshStatistics, compute_mesh_statistics
from .pipeline import MeshParams, GenerationResult, build_quad_mesh, generate_mesh

__all__ = ['QuadMapError', 'InvalidConfigurationError', 'MeshConsistencyError',
           'Mesh', 'VertexKind', 'AleaPRNG',
           'build_lattice', 'vertex_index', 'lattice_vertex_count',
           'triangulate', 'merge_triangles', 'subdivide',
           'index_adjacency', 'verify_adjacency', 'verify_quad_mesh',
           'relax', 'relax_vertex', 'export_graph',
           'MeshStatistics', 'compute_mesh_statistics',
           'MeshParams', 'GenerationResult', 'build_quad_mesh', 'generate_mesh']
