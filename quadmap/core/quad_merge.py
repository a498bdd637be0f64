"""Randomized greedy merging of edge-sharing triangles into quads."""

from itertools import combinations
from typing import List, Optional, Sequence

import structlog

from .alea_prng import AleaPRNG
from .mesh import Mesh

logger = structlog.get_logger()


def merge_face_pair(face_a: Sequence[int], face_b: Sequence[int]) -> Optional[List[int]]:
    """
    Merge two faces sharing exactly one edge into a quad.

    The quad is ordered ``[shared0, unique_a, shared1, unique_b]`` with the
    shared vertices in ``face_a``'s order. Simply concatenating the two
    vertex lists can yield a bowtie; alternating shared and unique
    vertices keeps the polygon simple.

    Returns:
        The quad's vertex cycle, or None if the faces do not share exactly
        two vertices or do not leave one unique vertex each
    """
    shared = [v for v in face_a if v in face_b]
    if len(shared) != 2:
        return None

    unique = [v for v in list(face_a) + list(face_b) if v not in shared]
    if len(unique) != 2:
        return None

    return [shared[0], unique[0], shared[1], unique[1]]


def merge_triangles(mesh: Mesh, prng: AleaPRNG) -> Mesh:
    """
    Pair adjacent triangles into quads in a random order.

    Every unordered face pair is enumerated, the pair list is shuffled with
    the run's PRNG, and pairs are accepted greedily in that order while
    both faces are still unconsumed. This is a randomized maximal matching,
    not a maximum one: unmatched triangles stay in the mesh and are left
    for the subdivider.

    Args:
        mesh: Triangulated mesh
        prng: The generation run's seeded generator

    Returns:
        Mesh whose faces are the merged quads in acceptance order followed
        by every unconsumed face in its original order
    """
    faces = mesh.faces
    vertex_sets = [frozenset(face) for face in faces]

    pairs = list(combinations(range(len(faces)), 2))
    prng.shuffle(pairs)

    consumed = set()
    merged: List[List[int]] = []

    for i, j in pairs:
        if i in consumed or j in consumed:
            continue
        if len(vertex_sets[i] & vertex_sets[j]) != 2:
            continue

        quad = merge_face_pair(faces[i], faces[j])
        if quad is None:
            continue

        merged.append(quad)
        consumed.add(i)
        consumed.add(j)

    leftover = [face for index, face in enumerate(faces) if index not in consumed]

    logger.info("Triangles merged",
                pairs_considered=len(pairs),
                quads=len(merged),
                leftover_faces=len(leftover))

    return mesh.with_faces(merged + leftover)
