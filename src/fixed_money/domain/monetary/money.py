from __future__ import annotations

import math
from decimal import Decimal

from fixed_money.domain.monetary.errors import (
    MoneyDivisionByZeroError,
    MoneyDomainError,
    MoneyOverflowError,
)
from fixed_money.domain.monetary.precision import Precision, get_precision
from fixed_money.domain.monetary.rounding import round_half_away
from fixed_money.utils.numeric_tools import (
    FloatLike,
    add_overflows,
    is_int64,
    sub_overflows,
    trunc_div,
    wrap_int64,
)


class Money:
    """Decimal amount stored as a scaled signed 64-bit integer.

    The raw integer `value` represents `value / precision.scale`. Every stored
    value is already rounded to the bound Precision; intermediate results may
    carry guard digits but are rounded half away from zero before being stored.

    Money is mutable: arithmetic methods change the receiver and return it, so
    calls can be chained (`m.add(n).mul_float(1.05)`). The argument of a binary
    method is never changed. Both operands of a binary method must share the
    same Precision.

    Two multiply paths exist on purpose:

    - `mul` multiplies two Money values in integer arithmetic and truncates the
      double-scale product back to the bound scale. No rounding is applied.
    - `mul_float` multiplies by a float factor at guard precision and rounds
      half away from zero. Financial formulas use this path.
    """

    # region Init

    def __init__(self, value: int = 0, precision: Precision | None = None):
        """Initialize Money from a raw scaled integer.

        Args:
            value (int): Raw scaled integer, e.g. 1234 for 12.34 at 2 decimal places.
            precision (Precision | None): Precision to bind. Defaults to the
                current process default (see `set_precision`).

        Raises:
            TypeError: If $value is not an int or $precision is not a Precision.
            MoneyOverflowError: If $value does not fit into a signed 64-bit integer.
        """
        if precision is None:
            precision = get_precision()

        # Raise: precision must be an instance of Precision
        if not isinstance(precision, Precision):
            raise TypeError(f"$precision must be a Precision instance, but provided value is: {precision!r}")

        self._precision = precision
        self._value = 0
        self.set(value)

    @classmethod
    def from_float(cls, value: FloatLike, precision: Precision | None = None) -> Money:
        """Create Money from a decimal amount, rounded to $precision (see `set_float`)."""
        result = cls(0, precision).set_float(value)
        return result

    @classmethod
    def from_str(cls, value_str: str, precision: Precision | None = None) -> Money:
        """Parse Money from decimal text like '1000.50' or '-0.005'.

        Args:
            value_str (str): Decimal text; surrounding whitespace is ignored.
            precision (Precision | None): Precision to bind.

        Returns:
            Money: Amount rounded to $precision.

        Raises:
            ValueError: If $value_str is empty or not a decimal number.
            MoneyDomainError: If $value_str is 'nan' or 'inf'.
        """
        # Raise: value_str must be a string
        if not isinstance(value_str, str):
            raise TypeError(f"$value_str must be a string, but provided value is: {value_str!r}")

        text = value_str.strip()
        if not text:
            raise ValueError("Value string with $value_str = '' cannot be empty")

        try:
            amount = float(text)
        except ValueError as e:
            raise ValueError(f"Value string with $value_str = '{value_str}' is not a decimal number") from e

        result = cls.from_float(amount, precision)
        return result

    # endregion

    # region Properties

    @property
    def value(self) -> int:
        """Raw scaled integer."""
        return self._value

    @property
    def precision(self) -> Precision:
        return self._precision

    # endregion

    # region Setters and getters

    def set(self, value: int) -> Money:
        """Store a raw scaled integer directly.

        Raises:
            TypeError: If $value is not an int.
            MoneyOverflowError: If $value does not fit into a signed 64-bit integer.
        """
        # Raise: raw value must be a plain int
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"$value must be an int, but provided value is: {value!r}")

        return self._store(value)

    def set_float(self, value: FloatLike) -> Money:
        """Store a decimal amount, rounding half away from zero to the bound scale.

        Raises:
            MoneyDomainError: If $value is NaN or infinite.
            MoneyOverflowError: If the scaled value does not fit into a signed 64-bit integer.
        """
        amount = float(value)

        # Raise: amount must be a finite number
        if not math.isfinite(amount):
            raise MoneyDomainError(f"Cannot call `set_float` because $value ({value}) is not a finite number")

        scaled = amount * self._precision.scale_float
        if not math.isfinite(scaled):
            raise MoneyOverflowError(f"Cannot call `set_float` because $value ({value}) overflows at {self._precision}")

        truncated = int(scaled)
        return self._store(round_half_away(truncated, scaled - truncated))

    def get(self) -> float:
        """Return the decimal amount as float."""
        return self._value / self._precision.scale_float

    def get_truncated(self) -> int:
        """Return the whole units of the amount, truncated toward zero."""
        return trunc_div(self._value, self._precision.scale)

    def to_decimal(self) -> Decimal:
        """Return the exact decimal amount."""
        return Decimal(self._value).scaleb(-self._precision.places)

    def copy(self) -> Money:
        """Return an independent Money with the same raw value and Precision."""
        return self.__class__(self._value, self._precision)

    # endregion

    # region Arithmetic

    def add(self, other: Money) -> Money:
        """Add $other to this Money.

        Raises:
            MoneyOverflowError: If the signed 64-bit sum overflows.
        """
        self._check_same_precision(other, "add")
        result = wrap_int64(self._value + other._value)

        # Raise: sign of the wrapped sum disagrees with both operands
        if add_overflows(self._value, other._value, result):
            raise MoneyOverflowError(f"Cannot call `add` because {self!r} + {other!r} overflows")

        return self._store(result)

    def sub(self, other: Money) -> Money:
        """Subtract $other from this Money.

        Raises:
            MoneyOverflowError: If the signed 64-bit difference overflows.
        """
        self._check_same_precision(other, "sub")
        result = wrap_int64(self._value - other._value)

        # Raise: sign of the wrapped difference disagrees with the minuend
        if sub_overflows(self._value, other._value, result):
            raise MoneyOverflowError(f"Cannot call `sub` because {self!r} - {other!r} overflows")

        return self._store(result)

    def mul(self, other: Money) -> Money:
        """Multiply by $other in integer arithmetic, truncating to the bound scale.

        This is the lower-fidelity path: the product is truncated, not rounded.
        For example at 2 decimal places, 0.15 * 0.25 = 0.0375 gives 0.03 here
        but 0.04 with `mul_float(0.25)`.

        Raises:
            MoneyOverflowError: If the result does not fit into a signed 64-bit integer.
        """
        self._check_same_precision(other, "mul")
        product = self._value * other._value
        return self._store(trunc_div(product, self._precision.scale))

    def mul_float(self, factor: FloatLike) -> Money:
        """Multiply by a float $factor at guard precision, rounding half away from zero.

        The factor is first truncated to `guard * scale` fixed-point digits; the
        product is then reduced to the bound scale and rounded once.

        Raises:
            MoneyDomainError: If $factor is NaN or infinite.
            MoneyOverflowError: If the result does not fit into a signed 64-bit integer.
        """
        factor_float = float(factor)

        # Raise: factor must be a finite number
        if not math.isfinite(factor_float):
            raise MoneyDomainError(f"Cannot call `mul_float` because $factor ({factor}) is not a finite number")

        precision = self._precision
        guarded_scale = precision.guard * precision.scale
        guarded_factor = int(factor_float * precision.guard_float * precision.scale_float)

        product = self._value * guarded_factor
        truncated = trunc_div(product, guarded_scale)
        remainder = (product - truncated * guarded_scale) / guarded_scale
        return self._store(round_half_away(truncated, remainder))

    def div(self, other: Money) -> Money:
        """Divide by $other, rounding half away from zero to the bound scale.

        Raises:
            MoneyDivisionByZeroError: If $other is zero.
            MoneyOverflowError: If the result does not fit into a signed 64-bit integer.
        """
        self._check_same_precision(other, "div")

        # Raise: divisor must not be zero
        if other._value == 0:
            raise MoneyDivisionByZeroError(f"Cannot call `div` because $other is zero: {other!r}")

        numerator = self._value * self._precision.scale
        truncated = trunc_div(numerator, other._value)
        remainder = (numerator - truncated * other._value) / other._value
        return self._store(round_half_away(truncated, remainder))

    def neg(self) -> Money:
        """Flip the sign of this Money (zero stays zero)."""
        if self._value != 0:
            self._store(-self._value)
        return self

    def abs(self) -> Money:
        """Make this Money non-negative."""
        if self._value < 0:
            self.neg()
        return self

    def sign(self) -> int:
        """Return -1 for negative amounts and 1 otherwise (zero counts as positive)."""
        if self._value < 0:
            return -1
        return 1

    def pow(self, exponent: FloatLike) -> Money:
        """Raise the decimal amount to a real $exponent and store the rounded result.

        Raises:
            MoneyDomainError: If the power is undefined (negative base with a
                fractional exponent, zero base with a negative exponent).
            MoneyOverflowError: If the result is too large.
        """
        exponent_float = float(exponent)
        base = self.get()
        try:
            result = math.pow(base, exponent_float)
        except ValueError as e:
            raise MoneyDomainError(f"Cannot call `pow` because {base} ** {exponent_float} is undefined") from e
        except OverflowError as e:
            raise MoneyOverflowError(f"Cannot call `pow` because {base} ** {exponent_float} overflows") from e

        return self.set_float(result)

    # endregion

    # region Utilities

    def _store(self, value: int) -> Money:
        # Raise: raw value must stay within the signed 64-bit range
        if not is_int64(value):
            raise MoneyOverflowError(f"Raw value {value} does not fit into a signed 64-bit integer at {self._precision}")

        self._value = value
        return self

    def _check_same_precision(self, other: Money, operation: str) -> None:
        """Check that $other is Money bound to the same Precision.

        Raises:
            TypeError: If $other is not Money.
            ValueError: If precisions don't match.
        """
        if not isinstance(other, Money):
            raise TypeError(f"Cannot call `{operation}` because $other must be Money, but provided value is: {other!r}")

        if self._precision != other._precision:
            raise ValueError(f"Cannot call `{operation}` on different precisions: {self._precision} and {other._precision}")

    # endregion

    # region Comparison

    def __eq__(self, other) -> bool:
        """Check equality with another Money object."""
        if not isinstance(other, Money):
            return False
        if self._precision != other._precision:
            return False
        return self._value == other._value

    # Mutable, therefore unhashable
    __hash__ = None

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_precision(other, "<")
        return self._value < other._value

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_precision(other, "<=")
        return self._value <= other._value

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_precision(other, ">")
        return self._value > other._value

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_precision(other, ">=")
        return self._value >= other._value

    # endregion

    # region Conversions

    def to_string(self) -> str:
        """Render the amount with exactly two fractional digits, e.g. '12.34'.

        The width is fixed regardless of the bound Precision: extra digits are
        truncated, missing digits are zero-filled. The receiver is not changed.
        """
        scale = self._precision.scale
        magnitude = abs(self._value)
        whole = magnitude // scale
        cents = (magnitude % scale) * 100 // scale
        sign = "-" if self._value < 0 else ""
        return f"{sign}{whole}.{cents:02d}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        """Return string like 'Money(1000.50, places=2)'."""
        return f"{self.__class__.__name__}({self.to_decimal()}, places={self._precision.places})"

    def __float__(self) -> float:
        return self.get()

    def __int__(self) -> int:
        return self.get_truncated()

    # endregion
