"""
Matrix: a row-major, value-semantic 2D container over a flat buffer.

The matrix stores its elements in a 1D float32/float64 `grid` of length
rows * columns; element (r, c) lives at grid[r * columns + c].

Copy-on-write:
    Reshaped matrices and read-only row/column views borrow the same
    buffer. A Matrix that has lent its buffer copies it before the next
    mutation, so a borrowed view or a sibling Matrix never observes a
    later write. Constructors copy a caller's array up front.

Operators:
    +  -          element-wise between equal-shaped matrices
    * (scalar)    scale every element
    * (Matrix)    element-wise product
    @             matrix product (Matrix or vector on either side)
    / (Matrix)    x @ inv(y)
    / (scalar)    element-wise division
    **            element-wise power
    .T            transpose
"""

from __future__ import annotations

import numbers
import operator
from typing import Any, Iterator, Sequence
import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pyvecmat.core.compute.precision import is_close
from pyvecmat.core.compute.tolerances import select_tolerance
from pyvecmat.core.exceptions import ValidationError, DimensionError
from pyvecmat.core.validation import (
    SUPPORTED_DTYPES,
    check_array,
    check_1d,
    check_2d,
    check_vector,
)


def _check_dimension(value: Any, name: str) -> int:
    try:
        n = operator.index(value)
    except TypeError as e:
        raise ValidationError(f"{name}: expected an integer, got {value!r}") from e
    if n <= 0:
        raise ValidationError(f"{name}: must be positive, got {n}")
    return n


def _check_dtype(dtype: DTypeLike) -> np.dtype:
    dt = np.dtype(dtype)
    if dt not in SUPPORTED_DTYPES:
        raise ValidationError(f"dtype: expected float32 or float64, got {dt}")
    return dt


class Matrix:
    """
    A matrix with float32 or float64 elements, in row-major (C) order.

    Construction:
        Matrix(rows, columns, grid)
        Matrix.full(rows, columns, value)
        Matrix.zeros(rows, columns)
        Matrix.identity(n)
        Matrix.from_rows([[1, 2], [3, 4]])
        Matrix.from_array(ndarray_2d)

    Invariant: len(grid) == rows * columns.
    """

    __slots__ = ('_rows', '_columns', '_grid', '_owned')

    # NumPy must defer to our reflected operators (vector @ Matrix)
    __array_ufunc__ = None

    def __init__(self, rows: int, columns: int, grid: ArrayLike):
        """
        Create a matrix from flat row-major contents (copy).

        Args:
            rows: Number of rows, > 0
            columns: Number of columns, > 0
            grid: 1D array-like of length rows * columns, row-major

        Raises:
            ValidationError: If rows/columns are not positive integers or
                grid is not numeric
            DimensionError: If grid is not 1D or has the wrong length
        """
        rows = _check_dimension(rows, 'rows')
        columns = _check_dimension(columns, 'columns')
        data = check_array(grid, 'grid')
        check_1d(data, 'grid')
        if data.shape[0] != rows * columns:
            raise DimensionError(
                f"grid: expected {rows * columns} elements for Matrix({rows},{columns}), "
                f"got {data.shape[0]}"
            )
        data = np.ascontiguousarray(data)
        if np.may_share_memory(data, np.asarray(grid)):
            data = data.copy()
        self._set_state(rows, columns, data, True)

    def _set_state(self, rows: int, columns: int, grid: NDArray, owned: bool) -> None:
        self._rows = rows
        self._columns = columns
        self._grid = grid
        self._owned = owned

    @classmethod
    def _wrap(
        cls,
        rows: int,
        columns: int,
        grid: NDArray[np.floating[Any]],
        owned: bool = True,
    ) -> Matrix:
        """Build a Matrix around an already validated contiguous 1D buffer."""
        m = cls.__new__(cls)
        m._set_state(rows, columns, grid, owned)
        return m

    # === Factory Methods ===

    @classmethod
    def full(
        cls,
        rows: int,
        columns: int,
        value: float,
        dtype: DTypeLike = np.float64,
    ) -> Matrix:
        """Create a matrix with every element set to `value`."""
        rows = _check_dimension(rows, 'rows')
        columns = _check_dimension(columns, 'columns')
        dt = _check_dtype(dtype)
        return cls._wrap(rows, columns, np.full(rows * columns, value, dtype=dt))

    @classmethod
    def zeros(cls, rows: int, columns: int, dtype: DTypeLike = np.float64) -> Matrix:
        return cls.full(rows, columns, 0.0, dtype=dtype)

    @classmethod
    def identity(cls, n: int, dtype: DTypeLike = np.float64) -> Matrix:
        """n x n identity matrix."""
        n = _check_dimension(n, 'n')
        dt = _check_dtype(dtype)
        return cls._wrap(n, n, np.eye(n, dtype=dt).reshape(-1))

    @classmethod
    def from_rows(
        cls,
        contents: Sequence[Sequence[float]],
        dtype: DTypeLike | None = None,
    ) -> Matrix:
        """
        Create a matrix from a sequence of rows (copy).

        Raises:
            ValidationError: If contents is empty or not numeric
            DimensionError: If rows have different lengths
        """
        row_list = [np.asarray(r) for r in contents]
        if not row_list:
            raise ValidationError("contents: requires at least 1 row, got 0")
        lengths = [r.shape[0] if r.ndim == 1 else -1 for r in row_list]
        if len(set(lengths)) > 1 or lengths[0] < 0:
            raise DimensionError(
                f"contents: rows must be 1D sequences of equal length, got lengths {lengths}"
            )
        data = check_array(np.stack(row_list), 'contents')
        if dtype is not None:
            data = data.astype(_check_dtype(dtype), copy=False)
        rows = _check_dimension(data.shape[0], 'rows')
        columns = _check_dimension(data.shape[1], 'columns')
        return cls._wrap(rows, columns, np.ascontiguousarray(data).reshape(-1).copy())

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Create a matrix from a 2D array (copy).

        Accepts NumPy arrays and anything exposing `.values` (e.g. a pandas
        DataFrame).

        Raises:
            DimensionError: If the array is not 2D
        """
        source = array.values if hasattr(array, 'values') else array
        data = check_array(source, 'array')
        check_2d(data, 'array')
        rows = _check_dimension(data.shape[0], 'rows')
        columns = _check_dimension(data.shape[1], 'columns')
        flat = np.ascontiguousarray(data).reshape(-1)
        if np.may_share_memory(flat, np.asarray(source)):
            flat = flat.copy()
        return cls._wrap(rows, columns, flat)

    # === Properties ===

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def size(self) -> int:
        """rows * columns."""
        return self._rows * self._columns

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._columns)

    @property
    def dtype(self) -> np.dtype:
        return self._grid.dtype

    @property
    def T(self) -> Matrix:
        """Transpose (copy)."""
        from pyvecmat.matrix import linalg
        return linalg.transpose(self)

    # === Buffer sharing ===

    def _lend(self, view: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
        """Hand out a read-only view; the next write to self copies first."""
        view.flags.writeable = False
        self._owned = False
        return view

    def _ensure_owned(self) -> None:
        if not self._owned:
            self._grid = self._grid.copy()
            self._owned = True

    def _as_2d(self) -> NDArray[np.floating[Any]]:
        """Internal 2D view of the grid (not handed to callers)."""
        return self._grid.reshape(self._rows, self._columns)

    # === Index checks ===

    def _check_row(self, row: Any) -> int:
        r = operator.index(row)
        if not 0 <= r < self._rows:
            raise IndexError(f"row index {r} out of range for Matrix({self._rows},{self._columns})")
        return r

    def _check_column(self, column: Any) -> int:
        c = operator.index(column)
        if not 0 <= c < self._columns:
            raise IndexError(
                f"column index {c} out of range for Matrix({self._rows},{self._columns})"
            )
        return c

    # === Element / row / column access ===

    def __getitem__(self, key: Any) -> Any:
        """
        m[r, c] returns a single element; m[r] returns row r (read-only view).
        """
        if isinstance(key, tuple):
            if len(key) != 2:
                raise IndexError(f"Matrix index must be (row, column), got {key!r}")
            r = self._check_row(key[0])
            c = self._check_column(key[1])
            return self._grid[r * self._columns + c]
        return self.row(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        """m[r, c] = v sets an element; m[r] = values replaces row r."""
        if isinstance(key, tuple):
            if len(key) != 2:
                raise IndexError(f"Matrix index must be (row, column), got {key!r}")
            r = self._check_row(key[0])
            c = self._check_column(key[1])
            self._ensure_owned()
            self._grid[r * self._columns + c] = value
            return
        self.set_row(key, value)

    def row(self, row: int) -> NDArray[np.floating[Any]]:
        """Row `row` as a read-only view (no copy)."""
        r = self._check_row(row)
        start = r * self._columns
        return self._lend(self._grid[start:start + self._columns])

    def set_row(self, row: int, values: ArrayLike) -> None:
        """
        Replace row `row`.

        Raises:
            DimensionError: If len(values) != columns
        """
        r = self._check_row(row)
        v = check_vector(values, 'values')
        if v.shape[0] != self._columns:
            raise DimensionError(
                f"values: row of Matrix({self._rows},{self._columns}) needs "
                f"{self._columns} elements, got {v.shape[0]}"
            )
        self._ensure_owned()
        start = r * self._columns
        self._grid[start:start + self._columns] = v

    def column(self, column: int) -> NDArray[np.floating[Any]]:
        """Column `column` as a read-only strided view (no copy)."""
        c = self._check_column(column)
        return self._lend(self._grid[c::self._columns])

    def set_column(self, column: int, values: ArrayLike) -> None:
        """
        Replace column `column`.

        Raises:
            DimensionError: If len(values) != rows
        """
        c = self._check_column(column)
        v = check_vector(values, 'values')
        if v.shape[0] != self._rows:
            raise DimensionError(
                f"values: column of Matrix({self._rows},{self._columns}) needs "
                f"{self._rows} elements, got {v.shape[0]}"
            )
        self._ensure_owned()
        self._grid[c::self._columns] = v

    # === Whole-matrix views and conversions ===

    def ravel(self) -> NDArray[np.floating[Any]]:
        """The grid as a read-only 1D view (deferred copy)."""
        return self._lend(self._grid[:])

    def reshape(self, rows: int, columns: int) -> Matrix:
        """
        Same contents reinterpreted as rows x columns (deferred copy).

        Raises:
            DimensionError: If rows * columns != size
        """
        rows = _check_dimension(rows, 'rows')
        columns = _check_dimension(columns, 'columns')
        if rows * columns != self.size:
            raise DimensionError(
                f"cannot reshape Matrix({self._rows},{self._columns}) to shape({rows},{columns})"
            )
        self._owned = False
        return Matrix._wrap(rows, columns, self._grid, owned=False)

    def copy(self) -> Matrix:
        return Matrix._wrap(self._rows, self._columns, self._grid.copy())

    def tolist(self) -> list[list[float]]:
        """Rows as nested Python lists (copy)."""
        return self._as_2d().tolist()

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """2D NumPy array (copy)."""
        return self._as_2d().copy()

    def __iter__(self) -> Iterator[NDArray[np.floating[Any]]]:
        """Iterate over rows (read-only views)."""
        for r in range(self._rows):
            yield self.row(r)

    def __len__(self) -> int:
        return self._rows

    # === Comparison ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._rows == other._rows
            and self._columns == other._columns
            and bool(np.array_equal(self._grid, other._grid))
        )

    __hash__ = None  # mutable

    def allclose(
        self,
        other: Matrix,
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        Same shape and element-wise close.

        Tolerances default to the tier for the less precise of the two dtypes.
        """
        if not isinstance(other, Matrix):
            raise ValidationError(f"other: expected Matrix, got {type(other).__name__}")
        if self.shape != other.shape:
            return False
        single = np.dtype(np.float32) in (self.dtype, other.dtype)
        tier = select_tolerance(np.float32 if single else np.float64)
        rtol = tier.rtol if rtol is None else rtol
        atol = tier.atol if atol is None else atol
        return bool(np.all(is_close(self._grid, other._grid, rtol=rtol, atol=atol)))

    # === Printing ===

    def __str__(self) -> str:
        lines = []
        for i in range(self._rows):
            start = i * self._columns
            contents = "\t".join(
                f"{v}" for v in self._grid[start:start + self._columns]
            )
            if self._rows == 1:
                lines.append(f"(\t{contents}\t)")
            elif i == 0:
                lines.append(f"⎛\t{contents}\t⎞")
            elif i == self._rows - 1:
                lines.append(f"⎝\t{contents}\t⎠")
            else:
                lines.append(f"⎜\t{contents}\t⎥")
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, columns={self._columns}, dtype={self.dtype})"

    # === Operators ===

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pyvecmat.matrix import linalg
        return linalg.add(self, other)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pyvecmat.matrix import linalg
        return linalg.sub(self, other)

    def __neg__(self) -> Matrix:
        return Matrix._wrap(self._rows, self._columns, np.negative(self._grid))

    def __mul__(self, other: Any) -> Matrix:
        from pyvecmat.matrix import linalg
        if isinstance(other, Matrix):
            return linalg.elmul(self, other)
        if isinstance(other, numbers.Real):
            return linalg.mul(other, self)
        return NotImplemented

    def __rmul__(self, other: Any) -> Matrix:
        if isinstance(other, numbers.Real):
            from pyvecmat.matrix import linalg
            return linalg.mul(other, self)
        return NotImplemented

    def __matmul__(self, other: Any) -> Matrix | NDArray[np.floating[Any]]:
        if isinstance(other, (Matrix, np.ndarray, list, tuple)):
            from pyvecmat.matrix import linalg
            return linalg._dot(self, other, 'cpu', stacklevel=3)
        return NotImplemented

    def __rmatmul__(self, other: Any) -> NDArray[np.floating[Any]]:
        if isinstance(other, (np.ndarray, list, tuple)):
            from pyvecmat.matrix import linalg
            return linalg._dot(other, self, 'cpu', stacklevel=3)
        return NotImplemented

    def __truediv__(self, other: Any) -> Matrix:
        from pyvecmat.matrix import linalg
        if isinstance(other, Matrix):
            return linalg._div(self, other, 'cpu', stacklevel=3)
        if isinstance(other, numbers.Real):
            with np.errstate(divide='ignore', invalid='ignore'):
                grid = self._grid / self.dtype.type(other)
            return Matrix._wrap(self._rows, self._columns, grid)
        return NotImplemented

    def __pow__(self, other: Any) -> Matrix:
        if isinstance(other, numbers.Real):
            from pyvecmat.matrix import linalg
            return linalg.pow(self, other)
        return NotImplemented
