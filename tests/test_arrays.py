from itertools import combinations

import pytest

from pdbqtdock.arrays import Array3D, Matrix, StrictlyTriangularMatrix, checked_multiply


def test_checked_multiply_values():
    assert checked_multiply(0, 2**70) == 0
    assert checked_multiply(2, 3, 4) == 24


def test_checked_multiply_overflow():
    with pytest.raises(MemoryError):
        checked_multiply(2**32, 2**32)


def test_array3d_set_get_and_dims():
    a = Array3D(2, 3, 4, factory=int)
    assert (a.dim0, a.dim1, a.dim2) == (2, 3, 4)
    assert [a.dim(i) for i in range(3)] == [2, 3, 4]
    a[1, 2, 3] = 7
    assert a[1, 2, 3] == 7
    assert a[0, 0, 0] == 0


def test_array3d_bad_index_and_dim():
    a = Array3D(2, 2, 2)
    with pytest.raises(IndexError):
        a[2, 0, 0]
    with pytest.raises(IndexError):
        a.dim(3)


def test_array3d_factory_makes_distinct_cells():
    a = Array3D(2, 1, 1, factory=list)
    a[0, 0, 0].append(5)
    assert a[1, 0, 0] == []


def test_array3d_resize():
    a = Array3D(1, 1, 1)
    a.resize(3, 2, 2)
    assert (a.dim0, a.dim1, a.dim2) == (3, 2, 2)
    a[2, 1, 1] = "x"
    assert a[2, 1, 1] == "x"
    a.resize(1, 1, 1)
    with pytest.raises(IndexError):
        a[1, 0, 0]


def test_matrix_column_major():
    m = Matrix(3, 2, 0)
    m[2, 1] = 9
    assert m[2 + m.dim_1 * 1] == 9


def test_matrix_resize_keeps_data():
    m = Matrix(2, 2, 0)
    m[1, 1] = 5
    m.resize(3, 4, -1)
    assert (m.dim_1, m.dim_2) == (3, 4)
    assert m[1, 1] == 5
    assert m[2, 3] == -1
    with pytest.raises(ValueError):
        m.resize(2, 4, 0)


def test_matrix_append_block():
    m = Matrix(1, 1, "a")
    other = Matrix(2, 1, "b")
    m.append(other, "f")
    assert (m.dim_1, m.dim_2) == (3, 2)
    assert m[0, 0] == "a"
    assert m[1, 1] == "b" and m[2, 1] == "b"
    assert m[1, 0] == "f" and m[0, 1] == "f"


def test_triangular_indices_cover_storage():
    t = StrictlyTriangularMatrix(5, 0)
    indices = [t.index(i, j) for i, j in combinations(range(5), 2)]
    assert sorted(indices) == list(range(len(indices)))


def test_triangular_permissive_and_errors():
    t = StrictlyTriangularMatrix(4, 0)
    assert t.index_permissive(3, 1) == t.index(1, 3)
    with pytest.raises(IndexError):
        t.index(1, 1)
    with pytest.raises(IndexError):
        t.index(0, 4)


def test_triangular_resize_preserves():
    t = StrictlyTriangularMatrix(3, 0)
    t[0, 2] = 8
    t.resize(5, 1)
    assert t.dim == 5
    assert t[0, 2] == 8
    assert t[3, 4] == 1
    with pytest.raises(ValueError):
        t.resize(2, 0)


def test_triangular_append_blocks():
    base = StrictlyTriangularMatrix(2, "base")
    rect = Matrix(2, 2, "rect")
    tri = StrictlyTriangularMatrix(2, "tri")
    base.append_blocks(rect, tri)
    assert base.dim == 4
    assert base[0, 1] == "base"
    assert base[2, 3] == "tri"
    assert all(base[i, j] == "rect" for i in range(2) for j in range(2, 4))


def test_triangular_append_blocks_empty_cases():
    empty = StrictlyTriangularMatrix()
    tri = StrictlyTriangularMatrix(3, 4)
    empty.append_blocks(Matrix(0, 3, 0), tri)
    assert empty.dim == 3 and empty[0, 2] == 4

    keep = StrictlyTriangularMatrix(2, 1)
    keep.append_blocks(Matrix(2, 0, 0), StrictlyTriangularMatrix())
    assert keep.dim == 2


def test_triangular_append_blocks_mismatch():
    t = StrictlyTriangularMatrix(2, 0)
    with pytest.raises(ValueError):
        t.append_blocks(Matrix(3, 1, 0), StrictlyTriangularMatrix(1, 0))