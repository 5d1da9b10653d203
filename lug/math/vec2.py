"""Immutable 2D vector value type.

Components are addressed by name (``v.x``, ``v.y``) or by 0-based position
(``v[0]``, ``v[1]``). Every operation returns a new vector; numeric operations
follow IEEE-754 and never raise, so division by zero yields ``inf`` or ``nan``.

    >>> v = V2(3, 4)
    >>> v.norm()
    5.0
    >>> str(v + V2(2, 1))
    '(5 5)'
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable, ClassVar, Iterator

from .. import config
from ..errors import IndexOutOfRange, InvalidArgument


def _ieee_div(a: float, b: float) -> float:
    """Divide like IEEE-754 instead of raising on a zero divisor."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _three_way(a: float, b: float) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


@dataclass(frozen=True)
class V2:
    """2D vector with ``x`` and ``y`` components."""

    type: ClassVar[str] = config.TYPE_NAME_PREFIX + "V2"

    x: float
    y: float

    # Construction

    @classmethod
    def from_first_two(cls, source: Any) -> "V2":
        """Copy the first two positional components of ``source``.

        Works with tuples, lists, other vectors or any value supporting
        ``source[0]`` and ``source[1]``, which makes it the conversion path
        from larger vectors.
        """
        try:
            x, y = source[0], source[1]
        except (IndexError, KeyError, TypeError) as exc:
            raise InvalidArgument(
                f"Cannot build {cls.type} from {type(source).__name__}: "
                f"expected at least {config.COMPONENT_COUNT} components."
            ) from exc
        return cls(x, y)

    @classmethod
    def polar_unit(cls, theta: float) -> "V2":
        """Unit vector with polar angle ``theta`` (radians)."""
        return cls(math.cos(theta), math.sin(theta))

    @classmethod
    def zero(cls) -> "V2":
        return cls(0.0, 0.0)

    @classmethod
    def unit_x(cls) -> "V2":
        return cls(1.0, 0.0)

    @classmethod
    def unit_y(cls) -> "V2":
        return cls(0.0, 1.0)

    @classmethod
    def positive_infinity(cls) -> "V2":
        return cls(math.inf, math.inf)

    @classmethod
    def negative_infinity(cls) -> "V2":
        return cls(-math.inf, -math.inf)

    # Accessors

    def component_at(self, index: int) -> float:
        """Component at 0-based ``index`` (0 is x, 1 is y)."""
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < config.COMPONENT_COUNT:
            raise IndexOutOfRange(f"{self.type} index must be 0 or 1, got {index!r}.")
        return self.y if index else self.x

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def to_display_string(self) -> str:
        """Textual form ``"(x y)"`` using ``%g`` formatting."""
        return config.DISPLAY_FORMAT % (self.x, self.y)

    # Arithmetic

    def neg(self) -> "V2":
        return V2(-self.x, -self.y)

    def add(self, other: "V2") -> "V2":
        return V2(self.x + other.x, self.y + other.y)

    def sub(self, other: "V2") -> "V2":
        return V2(self.x - other.x, self.y - other.y)

    def mul(self, other: "V2") -> "V2":
        """Component-wise (Hadamard) product."""
        return V2(self.x * other.x, self.y * other.y)

    def div(self, other: "V2") -> "V2":
        """Component-wise division; zero components give ``inf`` or ``nan``."""
        return V2(_ieee_div(self.x, other.x), _ieee_div(self.y, other.y))

    def scale(self, scalar: float) -> "V2":
        return V2(scalar * self.x, scalar * self.y)

    def half(self) -> "V2":
        return self.scale(0.5)

    def dot(self, other: "V2") -> float:
        return self.x * other.x + self.y * other.y

    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def norm_squared(self) -> float:
        """Squared length, avoids the square root."""
        return self.x * self.x + self.y * self.y

    def unit(self) -> "V2":
        """Vector scaled to length 1. The zero vector gives ``(nan, nan)``."""
        return self.scale(_ieee_div(1.0, self.norm()))

    def ortho(self) -> "V2":
        """Vector rotated by +90 degrees."""
        return V2(-self.y, self.x)

    def mix(self, other: "V2", t: float) -> "V2":
        """Linear interpolation ``self + t * (other - self)``.

        ``t`` is not clamped, values outside ``[0, 1]`` extrapolate.
        """
        return V2(
            self.x + t * (other.x - self.x),
            self.y + t * (other.y - self.y),
        )

    # Traversal

    def map(self, func: Callable[[float], float]) -> "V2":
        return V2(func(self.x), func(self.y))

    def map_indexed(self, func: Callable[[int, float], float]) -> "V2":
        return V2(func(0, self.x), func(1, self.y))

    def fold(self, acc: Any, func: Callable[[Any, float], Any]) -> Any:
        """Left fold over the components: ``func(func(acc, x), y)``."""
        return func(func(acc, self.x), self.y)

    def fold_indexed(self, acc: Any, func: Callable[[Any, int, float], Any]) -> Any:
        return func(func(acc, 0, self.x), 1, self.y)

    def for_each(self, func: Callable[[float], Any]) -> None:
        func(self.x)
        func(self.y)

    def for_each_indexed(self, func: Callable[[int, float], Any]) -> None:
        func(0, self.x)
        func(1, self.y)

    def iterate(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def iterate_indexed(self) -> Iterator[tuple[int, float]]:
        yield 0, self.x
        yield 1, self.y

    # Predicates

    def for_all(self, predicate: Callable[[float], bool]) -> bool:
        return predicate(self.x) and predicate(self.y)

    def exists(self, predicate: Callable[[float], bool]) -> bool:
        return predicate(self.x) or predicate(self.y)

    def equals(self, other: "V2", eq: Callable[[float, float], bool] | None = None) -> bool:
        """Component-wise equality, ``==`` unless ``eq`` is given.

        With the default comparison NaN is never equal to anything.
        """
        if eq is not None:
            return eq(self.x, other.x) and eq(self.y, other.y)
        return self.x == other.x and self.y == other.y

    def less_than(self, other: "V2", lt: Callable[[float, float], bool] | None = None) -> bool:
        """True if both components are strictly lower.

        This is a partial order: ``V2(1, 0)`` and ``V2(0, 1)`` are not
        comparable.
        """
        if lt is not None:
            return lt(self.x, other.x) and lt(self.y, other.y)
        return self.x < other.x and self.y < other.y

    def less_or_equal(self, other: "V2", le: Callable[[float, float], bool] | None = None) -> bool:
        if le is not None:
            return le(self.x, other.x) and le(self.y, other.y)
        return self.x <= other.x and self.y <= other.y

    def compare(self, other: "V2", cmp: Callable[[float, float], int] | None = None) -> int:
        """Lexicographic three-way comparison returning -1, 0 or 1.

        ``x`` decides unless equal, then ``y`` does. ``cmp`` replaces the
        per-component comparison and must return -1, 0 or 1. The default
        comparison reports 0 whenever a NaN is involved.
        """
        cmp = cmp or _three_way
        result = cmp(self.x, other.x)
        if result != 0:
            return result
        return cmp(self.y, other.y)

    # Operators

    def __neg__(self) -> "V2":
        return self.neg()

    def __add__(self, other: "V2") -> "V2":
        if not isinstance(other, V2):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "V2") -> "V2":
        if not isinstance(other, V2):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, scalar: float) -> "V2":
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.scale(scalar)

    def __rmul__(self, scalar: float) -> "V2":
        return self.__mul__(scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, V2):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other: "V2") -> bool:
        if not isinstance(other, V2):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other: "V2") -> bool:
        if not isinstance(other, V2):
            return NotImplemented
        return self.less_or_equal(other)

    def __gt__(self, other: "V2") -> bool:
        if not isinstance(other, V2):
            return NotImplemented
        return other.less_than(self)

    def __ge__(self, other: "V2") -> bool:
        if not isinstance(other, V2):
            return NotImplemented
        return other.less_or_equal(self)

    def __getitem__(self, index: int) -> float:
        return self.component_at(index)

    def __iter__(self) -> Iterator[float]:
        return self.iterate()

    def __len__(self) -> int:
        return config.COMPONENT_COUNT

    def __str__(self) -> str:
        return self.to_display_string()
