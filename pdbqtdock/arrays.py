"""Dense 3-D arrays and rectangular / strictly triangular matrices."""

from __future__ import annotations

from itertools import combinations, product
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar, Union

T = TypeVar("T")

SIZE_MAX = 2**64 - 1


def checked_multiply(*args: int) -> int:
    """Multiply sizes, raising MemoryError when the product cannot be a size."""
    result = 1
    for value in args:
        if value < 0:
            raise ValueError(f"negative size {value!r}")
        if result == 0 or value == 0:
            result = 0
            continue
        result *= value
        if result > SIZE_MAX:
            raise MemoryError("requested size does not fit in memory")
    return result


class Array3D(Generic[T]):
    """A 3-D array stored with the first index varying fastest."""

    def __init__(
        self, i: int = 0, j: int = 0, k: int = 0, factory: Optional[Callable[[], T]] = None
    ) -> None:
        self._factory = factory
        self._dims = (i, j, k)
        self._data: List[Any] = [self._new() for _ in range(checked_multiply(i, j, k))]

    def _new(self) -> Any:
        return self._factory() if self._factory is not None else None

    @property
    def dim0(self) -> int:
        return self._dims[0]

    @property
    def dim1(self) -> int:
        return self._dims[1]

    @property
    def dim2(self) -> int:
        return self._dims[2]

    def dim(self, i: int) -> int:
        if i not in (0, 1, 2):
            raise IndexError(f"dimension {i!r} out of range")
        return self._dims[i]

    def resize(self, i: int, j: int, k: int) -> None:
        """Change the shape; existing contents are not kept in place."""
        size = checked_multiply(i, j, k)
        self._dims = (i, j, k)
        if size <= len(self._data):
            del self._data[size:]
        else:
            self._data.extend(self._new() for _ in range(size - len(self._data)))

    def _offset(self, key: Tuple[int, int, int]) -> int:
        i, j, k = key
        for index, extent in zip((i, j, k), self._dims):
            if not 0 <= index < extent:
                raise IndexError(f"index {key!r} out of range for shape {self._dims!r}")
        return i + self._dims[0] * (j + self._dims[1] * k)

    def __getitem__(self, key: Tuple[int, int, int]) -> T:
        return self._data[self._offset(key)]

    def __setitem__(self, key: Tuple[int, int, int], value: T) -> None:
        self._data[self._offset(key)] = value


Key = Union[int, Tuple[int, int]]


class Matrix(Generic[T]):
    """A rectangular matrix stored in column-major order."""

    def __init__(self, i: int = 0, j: int = 0, filler: Any = None) -> None:
        self._data: List[Any] = [filler] * (i * j)
        self._m = i
        self._n = j

    @property
    def dim_1(self) -> int:
        return self._m

    @property
    def dim_2(self) -> int:
        return self._n

    def _index(self, i: int, j: int) -> int:
        if not (0 <= i < self._m and 0 <= j < self._n):
            raise IndexError(f"index ({i}, {j}) out of range for {self._m}x{self._n}")
        return i + self._m * j

    def resize(self, m: int, n: int, filler: Any) -> None:
        """Grow to m x n, keeping contents and filling new cells."""
        if m == self._m and n == self._n:
            return
        if m < self._m or n < self._n:
            raise ValueError("a matrix can only grow")
        data = [filler] * (m * n)
        for i, j in product(range(self._m), range(self._n)):
            data[i + m * j] = self[i, j]
        self._data = data
        self._m = m
        self._n = n

    def append(self, other: "Matrix[T]", filler: Any) -> None:
        """Place other as a new diagonal block; off-block cells get filler."""
        m, n = self._m, self._n
        self.resize(m + other.dim_1, n + other.dim_2, filler)
        for i, j in product(range(other.dim_1), range(other.dim_2)):
            self[i + m, j + n] = other[i, j]

    def __getitem__(self, key: Key) -> T:
        if isinstance(key, tuple):
            return self._data[self._index(*key)]
        return self._data[key]

    def __setitem__(self, key: Key, value: T) -> None:
        if isinstance(key, tuple):
            self._data[self._index(*key)] = value
        else:
            self._data[key] = value


class StrictlyTriangularMatrix(Generic[T]):
    """An n x n matrix holding only the cells (i, j) with i < j."""

    def __init__(self, n: int = 0, filler: Any = None) -> None:
        self._data: List[Any] = [filler] * (n * (n - 1) // 2)
        self._dim = n

    @property
    def dim(self) -> int:
        return self._dim

    def index(self, i: int, j: int) -> int:
        if not 0 <= i < j < self._dim:
            raise IndexError(f"index ({i}, {j}) not above the diagonal of size {self._dim}")
        return i + j * (j - 1) // 2

    def index_permissive(self, i: int, j: int) -> int:
        return self.index(i, j) if i < j else self.index(j, i)

    def resize(self, n: int, filler: Any) -> None:
        """Grow to size n, keeping the existing data."""
        if n == self._dim:
            return
        if n < self._dim:
            raise ValueError("a triangular matrix can only grow")
        self._dim = n
        self._data.extend([filler] * (n * (n - 1) // 2 - len(self._data)))

    def append(self, other: "StrictlyTriangularMatrix[T]", filler: Any) -> None:
        n = self._dim
        self.resize(n + other.dim, filler)
        for i, j in combinations(range(other.dim), 2):
            self[i + n, j + n] = other[i, j]

    def append_blocks(self, rectangular: Matrix[T], triangular: "StrictlyTriangularMatrix[T]") -> None:
        """Extend by a rectangular coupling block and a triangular diagonal block."""
        if self._dim != rectangular.dim_1:
            raise ValueError("rectangular block rows do not match the matrix size")
        if rectangular.dim_2 != triangular.dim:
            raise ValueError("rectangular block columns do not match the triangular block")
        if rectangular.dim_2 == 0:
            return
        if rectangular.dim_1 == 0:
            self._data = list(triangular._data)
            self._dim = triangular.dim
            return
        filler = rectangular[0, 0]
        n = self._dim
        self.append(triangular, filler)
        for i, j in product(range(rectangular.dim_1), range(rectangular.dim_2)):
            self[i, n + j] = rectangular[i, j]

    def __getitem__(self, key: Key) -> T:
        if isinstance(key, tuple):
            return self._data[self.index(*key)]
        return self._data[key]

    def __setitem__(self, key: Key, value: T) -> None:
        if isinstance(key, tuple):
            self._data[self.index(*key)] = value
        else:
            self._data[key] = value