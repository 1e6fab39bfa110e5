import numpy as np
import pytest
from pydantic import ValidationError
from rich.console import Console

from zhomology.data.complex import SimplicialComplex
from zhomology.data.containers import HomologyGroup, Summand
from zhomology.data.utils import identity, zeros
from zhomology.utils.display import homology_table, print_homology


def test_summand_tags():
    assert Summand.free().is_free
    assert str(Summand.free()) == "Z"
    assert str(Summand.torsion(3)) == "Z/3"
    with pytest.raises(ValidationError):
        Summand(kind="torsion")
    with pytest.raises(ValidationError):
        Summand(kind="free", order=2)
    with pytest.raises(ValidationError):
        Summand.torsion(1)


def test_homology_group_views():
    group = HomologyGroup(
        dimension=1,
        generators=identity(3),
        summands=[Summand.free(), Summand.free(), Summand.torsion(2)],
    )
    assert group.betti_number == 2
    assert group.torsion == [2]
    assert group.orders == [1, 1, 2]
    assert str(group) == "Z^2 + Z/2"
    assert not group.is_trivial


def test_trivial_group():
    group = HomologyGroup(dimension=2, generators=zeros(4, 0))
    assert group.is_trivial
    assert str(group) == "0"
    assert group.orders == []


def test_generator_count_must_match():
    with pytest.raises(ValidationError):
        HomologyGroup(dimension=0, generators=identity(2), summands=[Summand.free()])
    with pytest.raises(ValidationError):
        HomologyGroup(dimension=0, generators=np.zeros(3, dtype=object))


def test_complex_accepts_bare_vertices():
    sc = SimplicialComplex.from_simplices([0, 1, 2], [[0, 1], [1, 2]])
    assert sc[0] == ((0,), (1,), (2,))
    assert sc[1] == ((0, 1), (1, 2))
    assert sc.dimension == 1
    assert sc.chain_ranks == [3, 2]
    assert sc.n_simplices(5) == 0
    assert sc.euler_characteristic == 1
    assert sc.index_of(1)[frozenset((2, 1))] == 1


@pytest.mark.parametrize(
    "levels",
    [
        ([0, 1], [(0, 1, 2)]),
        ([0, 1], [(0, 0)]),
        ([0, 1], [(0, 1), (1, 0)]),
        ([0, -1],),
    ],
)
def test_complex_rejects_bad_simplices(levels):
    with pytest.raises(ValidationError):
        SimplicialComplex.from_simplices(*levels)


def test_complex_needs_a_level():
    with pytest.raises(ValidationError):
        SimplicialComplex(simplices=[])


def test_complex_is_frozen(tetrahedron):
    with pytest.raises(ValidationError):
        tetrahedron.simplices = ()


def test_homology_table_rows():
    groups = [
        HomologyGroup(dimension=0, generators=identity(1), summands=[Summand.free()]),
        HomologyGroup(dimension=1, generators=identity(1), summands=[Summand.torsion(2)]),
    ]
    table = homology_table(groups)
    assert table.row_count == 2
    console = Console(record=True, width=100)
    print_homology(groups, console=console)
    text = console.export_text()
    assert "Z/2" in text
    assert "Integral homology" in text
