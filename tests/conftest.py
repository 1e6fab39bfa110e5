import sys
from itertools import combinations
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from zhomology.data.complex import SimplicialComplex  # noqa: E402

TORUS_EDGES = [
    (0, 1), (0, 2), (0, 3), (0, 4), (0, 6), (0, 7), (1, 2), (1, 4), (1, 5),
    (1, 7), (1, 8), (2, 3), (2, 5), (2, 6), (2, 8), (3, 4), (3, 5), (3, 7),
    (3, 8), (4, 5), (4, 6), (4, 8), (5, 6), (5, 7), (6, 7), (6, 8), (7, 8),
]  # fmt: skip
TORUS_FACES = [
    (0, 1, 4), (1, 4, 5), (1, 2, 5), (2, 5, 6), (0, 6, 2), (0, 6, 4),
    (3, 4, 5), (3, 7, 5), (5, 6, 7), (6, 7, 8), (4, 8, 6), (3, 4, 8),
    (0, 3, 7), (0, 1, 7), (1, 7, 8), (1, 2, 8), (2, 8, 3), (0, 3, 2),
]  # fmt: skip
KLEIN_EDGES = [
    (0, 1), (0, 2), (0, 3), (0, 4), (0, 6), (0, 7), (1, 2), (1, 5), (1, 6),
    (1, 7), (1, 8), (2, 3), (2, 4), (2, 5), (2, 8), (3, 4), (3, 5), (3, 7),
    (3, 8), (4, 5), (4, 6), (4, 8), (5, 6), (5, 7), (6, 7), (6, 8), (7, 8),
]  # fmt: skip
KLEIN_FACES = [
    (0, 4, 2), (2, 4, 5), (1, 2, 5), (1, 5, 6), (0, 1, 6), (0, 6, 4),
    (3, 5, 4), (3, 7, 5), (5, 7, 6), (6, 7, 8), (4, 6, 8), (3, 4, 8),
    (0, 7, 3), (0, 1, 7), (1, 8, 7), (1, 2, 8), (2, 3, 8), (0, 3, 2),
]  # fmt: skip
PROJECTIVE_PLANE_FACES = [
    (0, 1, 2), (0, 2, 3), (0, 3, 4), (0, 4, 5), (0, 1, 5),
    (1, 2, 4), (1, 3, 4), (1, 3, 5), (2, 3, 5), (2, 4, 5),
]  # fmt: skip


def _closure(vertices, faces) -> SimplicialComplex:
    edges = sorted({tuple(sorted(e)) for f in faces for e in combinations(f, 2)})
    return SimplicialComplex.from_simplices(vertices, edges, faces)


@pytest.fixture(scope="session")
def tetrahedron():
    vertices = [0, 1, 2, 3]
    return SimplicialComplex.from_simplices(
        vertices,
        list(combinations(vertices, 2)),
        list(combinations(vertices, 3)),
    )


@pytest.fixture(scope="session")
def torus():
    return SimplicialComplex.from_simplices(list(range(9)), TORUS_EDGES, TORUS_FACES)


@pytest.fixture(scope="session")
def klein_bottle():
    return SimplicialComplex.from_simplices(list(range(9)), KLEIN_EDGES, KLEIN_FACES)


@pytest.fixture(scope="session")
def projective_plane():
    return _closure(list(range(6)), PROJECTIVE_PLANE_FACES)


@pytest.fixture(scope="session")
def circle():
    return SimplicialComplex.from_simplices([0, 1, 2], [(0, 1), (1, 2), (0, 2)])


@pytest.fixture(scope="session")
def solid_simplex():
    vertices = [0, 1, 2, 3]
    return SimplicialComplex.from_simplices(
        *[list(combinations(vertices, k)) for k in range(1, 5)]
    )


@pytest.fixture(scope="session")
def surfaces(tetrahedron, torus, klein_bottle, projective_plane):
    return {
        "tetrahedron": tetrahedron,
        "torus": torus,
        "klein_bottle": klein_bottle,
        "projective_plane": projective_plane,
    }
