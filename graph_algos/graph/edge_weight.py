"""Signed-infinity integer weights used for edges and accumulated distances.

`EdgeWeight` is a three-valued number: a finite integer, positive infinity,
or negative infinity. It has a total order and a restricted arithmetic in
which every operation involving infinities is either defined or raises
:class:`~graph_algos.exceptions.UndefinedWeightOperation`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional, Tuple, Union, cast

from graph_algos.exceptions import UndefinedWeightOperation


class WeightKind(IntEnum):
    """Kinds of edge weight, in ascending order."""

    NEG_INFINITY = -1
    FINITE = 0
    POS_INFINITY = 1


#: Values accepted wherever an ``EdgeWeight`` is expected.
WeightLike = Union["EdgeWeight", int, float]


@dataclass(frozen=True, eq=False)
class EdgeWeight:
    """A finite integer weight or one of the two signed infinities.

    ``EdgeWeight(5)`` builds a finite weight; use :meth:`infinity` and
    :meth:`neg_infinity` for the infinite ones. Plain integers are accepted
    as the other operand of arithmetic and comparisons, and a finite weight
    compares and hashes equal to its integer value.

    Attributes:
        value: The integer value for finite weights, ``None`` otherwise.
        kind: Which of the three kinds this weight is.
    """

    value: Optional[int] = 0
    kind: WeightKind = WeightKind.FINITE

    def __post_init__(self) -> None:
        if self.kind == WeightKind.FINITE:
            if isinstance(self.value, bool) or not isinstance(self.value, int):
                raise TypeError(
                    f"Finite weight must be an int, got {type(self.value).__name__}."
                )
        elif self.value is not None:
            raise TypeError("Infinite weights carry no value.")

    #
    # Constructors
    #
    @classmethod
    def finite(cls, value: int) -> EdgeWeight:
        """Return a finite weight of ``value``."""
        return cls(value)

    @classmethod
    def zero(cls) -> EdgeWeight:
        """Return the finite weight ``0`` (the default weight)."""
        return cls(0)

    @classmethod
    def infinity(cls) -> EdgeWeight:
        """Return positive infinity."""
        return cls(None, WeightKind.POS_INFINITY)

    @classmethod
    def neg_infinity(cls) -> EdgeWeight:
        """Return negative infinity."""
        return cls(None, WeightKind.NEG_INFINITY)

    @classmethod
    def coerce(cls, value: WeightLike) -> EdgeWeight:
        """Convert an int, an integral or infinite float, or a weight to ``EdgeWeight``.

        Args:
            value: The value to convert.

        Returns:
            The matching ``EdgeWeight``.

        Raises:
            TypeError: If ``value`` cannot represent a weight.
        """
        if isinstance(value, EdgeWeight):
            return value
        if isinstance(value, bool):
            raise TypeError("bool is not a valid edge weight.")
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, float):
            if value == math.inf:
                return cls.infinity()
            if value == -math.inf:
                return cls.neg_infinity()
            if value.is_integer():
                return cls(int(value))
        raise TypeError(f"Cannot convert {value!r} to an edge weight.")

    @classmethod
    def parse(cls, text: str) -> EdgeWeight:
        """Parse a weight from text.

        Integers parse to finite weights; ``inf``/``+inf`` and ``-inf`` parse
        to the infinities, mirroring :meth:`__str__`.

        Raises:
            ValueError: If ``text`` is not an integer or an infinity.
        """
        token = text.strip()
        if token in ("inf", "+inf"):
            return cls.infinity()
        if token == "-inf":
            return cls.neg_infinity()
        return cls(int(token))

    #
    # Queries
    #
    @property
    def is_finite(self) -> bool:
        return self.kind == WeightKind.FINITE

    @property
    def is_infinite(self) -> bool:
        return self.kind != WeightKind.FINITE

    @property
    def _int(self) -> int:
        # Only meaningful for finite weights.
        return cast(int, self.value)

    def _key(self) -> Tuple[int, int]:
        return (int(self.kind), self._int if self.is_finite else 0)

    #
    # Arithmetic
    #
    def negate(self) -> EdgeWeight:
        """Flip the sign: ``-5 -> 5``, ``+inf -> -inf``, ``-inf -> +inf``."""
        if self.kind == WeightKind.FINITE:
            return EdgeWeight(-self._int)
        if self.kind == WeightKind.POS_INFINITY:
            return EdgeWeight.neg_infinity()
        return EdgeWeight.infinity()

    def add(self, other: WeightLike) -> EdgeWeight:
        """Return ``self + other``.

        An infinity plus anything finite is that infinity, and two infinities
        of the same sign add to that infinity.

        Raises:
            UndefinedWeightOperation: For ``+inf + -inf`` in either order.
        """
        other = EdgeWeight.coerce(other)
        if self.is_finite and other.is_finite:
            return EdgeWeight(self._int + other._int)
        if other.is_finite:
            return self
        if self.is_finite:
            return other
        if self.kind == other.kind:
            return self
        raise UndefinedWeightOperation(f"Cannot add {self} and {other} - undefined.")

    def subtract(self, other: WeightLike) -> EdgeWeight:
        """Return ``self - other``.

        An infinity minus anything finite is that infinity; a finite value
        minus an infinity is the opposite infinity; infinities of opposite
        sign give the left operand.

        Raises:
            UndefinedWeightOperation: For ``+inf - +inf`` and ``-inf - -inf``.
        """
        other = EdgeWeight.coerce(other)
        if self.is_finite and other.is_finite:
            return EdgeWeight(self._int - other._int)
        if other.is_finite:
            return self
        if self.is_finite:
            return other.negate()
        if self.kind != other.kind:
            return self
        raise UndefinedWeightOperation(
            f"Cannot subtract {other} from {self} - undefined."
        )

    def __add__(self, other: Any) -> EdgeWeight:
        try:
            return self.add(other)
        except TypeError:
            return NotImplemented

    def __radd__(self, other: Any) -> EdgeWeight:
        try:
            return EdgeWeight.coerce(other).add(self)
        except TypeError:
            return NotImplemented

    def __sub__(self, other: Any) -> EdgeWeight:
        try:
            return self.subtract(other)
        except TypeError:
            return NotImplemented

    def __rsub__(self, other: Any) -> EdgeWeight:
        try:
            return EdgeWeight.coerce(other).subtract(self)
        except TypeError:
            return NotImplemented

    def __neg__(self) -> EdgeWeight:
        return self.negate()

    #
    # Ordering and equality
    #
    def _other_key(self, other: Any) -> Optional[Tuple[int, int]]:
        try:
            return EdgeWeight.coerce(other)._key()
        except TypeError:
            return None

    def __eq__(self, other: Any) -> bool:
        key = self._other_key(other)
        if key is None:
            return NotImplemented
        return self._key() == key

    def __lt__(self, other: Any) -> bool:
        key = self._other_key(other)
        if key is None:
            return NotImplemented
        return self._key() < key

    def __le__(self, other: Any) -> bool:
        key = self._other_key(other)
        if key is None:
            return NotImplemented
        return self._key() <= key

    def __gt__(self, other: Any) -> bool:
        key = self._other_key(other)
        if key is None:
            return NotImplemented
        return self._key() > key

    def __ge__(self, other: Any) -> bool:
        key = self._other_key(other)
        if key is None:
            return NotImplemented
        return self._key() >= key

    def __hash__(self) -> int:
        # Consistent with equality against int and float infinities.
        if self.kind == WeightKind.POS_INFINITY:
            return hash(math.inf)
        if self.kind == WeightKind.NEG_INFINITY:
            return hash(-math.inf)
        return hash(self.value)

    #
    # Conversions
    #
    def to_number(self) -> Union[int, float]:
        """Return the int value, or ``math.inf`` / ``-math.inf`` for infinities."""
        if self.kind == WeightKind.POS_INFINITY:
            return math.inf
        if self.kind == WeightKind.NEG_INFINITY:
            return -math.inf
        return self._int

    def __str__(self) -> str:
        if self.kind == WeightKind.POS_INFINITY:
            return "+inf"
        if self.kind == WeightKind.NEG_INFINITY:
            return "-inf"
        return str(self.value)

    def __repr__(self) -> str:
        if self.kind == WeightKind.POS_INFINITY:
            return "EdgeWeight.infinity()"
        if self.kind == WeightKind.NEG_INFINITY:
            return "EdgeWeight.neg_infinity()"
        return f"EdgeWeight({self.value})"
