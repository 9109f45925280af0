"""
Fixed-width unsigned 128-bit integer built from two 64-bit words.

Python ints never overflow, so the word pair is what gives this type its
contract: every value fits in 128 bits, every checked operation reports when the
true result would not, and the unchecked ones wrap exactly like machine words.

Logical value is ``hi * 2**64 + lo``.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from enum import IntEnum, unique
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import Uint128OverflowError

# @formatter:off

WORD_BITS = 64
WORD_MASK = (1 << WORD_BITS) - 1
MAX_UINT64 = WORD_MASK
MAX_UINT128 = (1 << 2 * WORD_BITS) - 1

# @formatter:on

# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Ordering(IntEnum):
    """Result of a three-way comparison."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True, eq=False)
class Uint128:
    """
    Immutable unsigned 128-bit integer stored as a (lo, hi) pair of 64-bit words.

    Operations never mutate the receiver; they return a new value of the
    receiver's own class, so subclasses (e.g. ByteSize) survive arithmetic.

    Checked vs unchecked:
        add(), mul64()                  - wrap modulo 2**128, no error path
        add_checked(), mul64_checked()  - raise Uint128OverflowError instead of wrapping
        +, *                            - checked

    Examples:
        >>> Uint128(lo=1024)
        Uint128(lo=1024, hi=0)
        >>> int(Uint128(lo=0, hi=1 << 6))  # 2**70
        1180591620717411303424
        >>> Uint128(lo=WORD_MASK).add(Uint128(lo=1))
        Uint128(lo=0, hi=1)
    """

    lo: int = 0
    hi: int = 0

    def __post_init__(self):
        for name in ("lo", "hi"):
            word = getattr(self, name)
            if not isinstance(word, int) or isinstance(word, bool):
                raise TypeError(f"'{name}' word must be int, got {type(word).__name__}")
            if not 0 <= word <= WORD_MASK:
                raise ValueError(f"'{name}' word must be in range [0, 2**64), got {word}")

    @classmethod
    def from_int(cls, value: int) -> Self:
        """
        Narrow a Python int into the word pair.

        Raises:
            TypeError: If value is not an int.
            ValueError: If value is negative.
            Uint128OverflowError: If value needs more than 128 bits.
        """
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"int required, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"unsigned value required, got {value}")
        if value.bit_length() > 2 * WORD_BITS:
            raise Uint128OverflowError(f"value needs {value.bit_length()} bits, exceeds 128")
        return cls(lo=value & WORD_MASK, hi=value >> WORD_BITS)

    # ----- Arithmetic -----

    def add(self, other: "Uint128") -> Self:
        """
        Sum with carry from lo into hi.

        Unchecked: a carry out of bit 127 is dropped and the result wraps modulo 2**128.
        Callers must bound their operands or use add_checked().
        """
        lo, hi, _ = self._add_words(other)
        return self.__class__(lo=lo, hi=hi)

    def add_checked(self, other: "Uint128") -> Self:
        """Sum that raises Uint128OverflowError when the true result exceeds 2**128 - 1."""
        lo, hi, carry = self._add_words(other)
        if carry:
            raise Uint128OverflowError(f"{int(self)} + {int(other)} overflows 128 bits")
        return self.__class__(lo=lo, hi=hi)

    def mul64(self, k: int) -> Self:
        """
        Product with a 64-bit scalar, truncated to the low 128 bits.

        Only for products known in advance to fit, like the fixed unit ladder.
        """
        lo, hi, _ = self._mul64_words(k)
        return self.__class__(lo=lo, hi=hi)

    def mul64_checked(self, k: int) -> Self:
        """Product with a 64-bit scalar that raises Uint128OverflowError instead of wrapping."""
        lo, hi, top = self._mul64_words(k)
        if top:
            raise Uint128OverflowError(f"{int(self)} * {k} overflows 128 bits")
        return self.__class__(lo=lo, hi=hi)

    # ----- Comparison -----

    def cmp(self, other: "Uint128") -> Ordering:
        """Total order: high words first, low words on a tie."""
        if not isinstance(other, Uint128):
            raise TypeError(f"Uint128 required, got {type(other).__name__}")
        if self.hi != other.hi:
            return Ordering.LESS if self.hi < other.hi else Ordering.GREATER
        if self.lo != other.lo:
            return Ordering.LESS if self.lo < other.lo else Ordering.GREATER
        return Ordering.EQUAL

    def bit_length(self) -> int:
        """Number of bits needed to represent the value, 0 for zero and at most 128."""
        if self.hi:
            return WORD_BITS + self.hi.bit_length()
        return self.lo.bit_length()

    @property
    def is_zero(self) -> bool:
        return self.lo == 0 and self.hi == 0

    # ----- Dunders -----

    def __int__(self) -> int:
        return (self.hi << WORD_BITS) | self.lo

    def __bool__(self) -> bool:
        return not self.is_zero

    def __eq__(self, other) -> bool:
        if isinstance(other, Uint128):
            return self.lo == other.lo and self.hi == other.hi
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.lo, self.hi))

    def __lt__(self, other) -> bool:
        if not isinstance(other, Uint128):
            return NotImplemented
        return self.cmp(other) is Ordering.LESS

    def __le__(self, other) -> bool:
        if not isinstance(other, Uint128):
            return NotImplemented
        return self.cmp(other) is not Ordering.GREATER

    def __gt__(self, other) -> bool:
        if not isinstance(other, Uint128):
            return NotImplemented
        return self.cmp(other) is Ordering.GREATER

    def __ge__(self, other) -> bool:
        if not isinstance(other, Uint128):
            return NotImplemented
        return self.cmp(other) is not Ordering.LESS

    def __add__(self, other) -> Self:
        if not isinstance(other, Uint128):
            return NotImplemented
        return self.add_checked(other)

    def __mul__(self, k) -> Self:
        if not isinstance(k, int) or isinstance(k, bool):
            return NotImplemented
        return self.mul64_checked(k)

    __rmul__ = __mul__

    # ----- Word arithmetic -----

    def _add_words(self, other: "Uint128") -> tuple[int, int, int]:
        """Return (lo, hi, carry out of bit 127)."""
        if not isinstance(other, Uint128):
            raise TypeError(f"Uint128 required, got {type(other).__name__}")
        lo = self.lo + other.lo
        carry = lo >> WORD_BITS
        hi = self.hi + other.hi + carry
        return lo & WORD_MASK, hi & WORD_MASK, hi >> WORD_BITS

    def _mul64_words(self, k: int) -> tuple[int, int, int]:
        """
        Return the three 64-bit words (w0, w1, w2) of the 192-bit product self * k.

        self * k = lo*k + (hi*k << 64), each partial product spans two words.
        """
        _check_scalar(k)
        p0 = self.lo * k
        p1 = self.hi * k
        w0 = p0 & WORD_MASK
        mid = (p0 >> WORD_BITS) + (p1 & WORD_MASK)
        w1 = mid & WORD_MASK
        w2 = (p1 >> WORD_BITS) + (mid >> WORD_BITS)
        return w0, w1, w2


# Methods --------------------------------------------------------------------------------------------------------------

def _check_scalar(k: int):
    if not isinstance(k, int) or isinstance(k, bool):
        raise TypeError(f"scalar must be int, got {type(k).__name__}")
    if not 0 <= k <= MAX_UINT64:
        raise ValueError(f"scalar must be in range [0, 2**64), got {k}")
