"""
Shared fixtures: small hand-checkable structures.

    quad         two triangles A,B,C / B,D,C sharing edge B-C (one boundary loop of 4)
    tetrahedron  closed surface, outward normals
    bowtie       two triangles touching at a single vertex O
"""

import numpy as np
import pytest

from halfmesh.core import HalfedgeDS


QUAD_POSITIONS = np.array([
    [0.0, 0.0, 0.0],   # A
    [1.0, 0.0, 0.0],   # B
    [0.0, 1.0, 0.0],   # C
    [1.0, 1.0, 0.0],   # D
])
QUAD_INDEX = [0, 1, 2, 1, 3, 2]

TETRA_POSITIONS = np.array([
    [0.0, 0.0, 0.0],
    [1.0, 0.0, 0.0],
    [0.0, 1.0, 0.0],
    [0.0, 0.0, 1.0],
])
TETRA_INDEX = [0, 2, 1, 0, 1, 3, 0, 3, 2, 1, 2, 3]

BOWTIE_POSITIONS = np.array([
    [0.0, 0.0, 0.0],    # O
    [1.0, 0.0, 0.0],    # A
    [1.0, 1.0, 0.0],    # B
    [-1.0, 0.0, 0.0],   # C
    [-1.0, -1.0, 0.0],  # D
])
BOWTIE_INDEX = [0, 1, 2, 0, 3, 4]


@pytest.fixture
def quad():
    return HalfedgeDS().build_from_geometry(QUAD_POSITIONS, QUAD_INDEX)


@pytest.fixture
def tetrahedron():
    return HalfedgeDS().build_from_geometry(TETRA_POSITIONS, TETRA_INDEX)


@pytest.fixture
def bowtie():
    return HalfedgeDS().build_from_geometry(BOWTIE_POSITIONS, BOWTIE_INDEX)


def vertex_by_id(struct, vid):
    for v in struct.vertices:
        if v.id == vid:
            return v
    raise KeyError(vid)
