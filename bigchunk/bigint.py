"""
A BigInt is an unsigned integer of any size, built from a list of fixed-width chunks.

Features:
 - arbitrary precision
 - decimal, hexadecimal, binary numerals in and out
 - arithmetic done chunk by chunk, never by handing the whole job to Python's int

Example:

    assert '579' == str(BigInt('123') + BigInt('456'))
    assert '1a' == BigInt('0x1A').hex()
    assert BigInt(1024) == BigInt(2) ** 10
"""

import logging

from . import chunking


logger = logging.getLogger(__name__)


class BigInt(object):
    """
    Unsigned integers of any size.

    A BigInt is internally a list of chunks, each an unsigned CHUNK_BITS-wide integer.
    The least significant chunk comes first.
        Example:  [0x0000000000000001, 0x0000000000000002] is 2**65 + 1
    The list is always trimmed:  no zero chunks at the most significant end.
    Except zero itself, which is exactly one zero chunk, [0].

    Text representations are numerals:
        '26'        decimal
        '0x1A'      hexadecimal (either case)
        '0b11010'   binary
    Underscores anywhere in the digits are ignored, e.g. '1_000_000' or '0xFFFF_FFFF'.

    Arithmetic follows the classic paper-and-pencil algorithms, one chunk or one bit at a time:
        +   carry across chunks
        -   borrow across chunks
        *   shift-and-add
        //  restoring binary long division, which also gives %
        **  square-and-multiply

    Values behave as immutable.  Operations return new instances.
    The one exception is set_bit(), which changes the instance it is called on.

    Operands are BigInts of any chunk width, or non-negative ints.
    A negative int is never equal to a BigInt, and ordering against one is a TypeError:
        assert not BigInt(1) == -1
        BigInt(1) < -1   # TypeError
    """

    __slots__ = ('_chunks', '_frozen')

    CHUNK_BITS = 64
    CHUNK_MASK = None   # Computed by internal_setup() from CHUNK_BITS

    def __init__(self, content=None):
        """
        BigInt constructor.

        content - the type can be:
            None             zero
            int              1024  (non-negative)
            numeral string   '1024' or '0x400' or '0b100_0000_0000'
            another BigInt   BigInt(1024)
        """
        self._frozen = False
        if content is None:
            self._chunks = [0]
        elif isinstance(content, int):
            self._from_int(content)
        elif isinstance(content, BigInt):
            self._from_another_bigint(content)
        elif isinstance(content, str):
            self._chunks = self._chunks_from_numeral(content)
        else:
            raise self.ConstructorTypeError("{outer}({inner}) is not supported".format(
                outer=type(self).__name__,
                inner=type(content).__name__,
            ))

    def _from_int(self, i):
        """Fill in chunks from a native int."""
        if i < 0:
            raise self.NegativeResult("{} cannot represent {}".format(type(self).__name__, i))
        self._chunks = chunking.chunks_from_int(i, self.CHUNK_BITS)

    def _from_another_bigint(self, another_bigint):
        """
        Copy constructor.

        The copy owns its own chunk list, so set_bit() on one does not affect the other.
        It can also convert between chunk widths:

            assert (0x12, 0x34) == BigInt8(BigInt(0x3412)).chunks
        """
        if another_bigint.CHUNK_BITS == self.CHUNK_BITS:
            self._chunks = list(another_bigint._chunks)
        else:
            self._from_int(int(another_bigint))

    class ConstructorTypeError(TypeError):
        """e.g. BigInt(3.14) or BigInt([1, 2])"""

    class InvalidNumeral(ValueError):
        """e.g. BigInt('0x12G4') or BigInt('12.5') or BigInt('0b')"""

        def __init__(self, message, base):
            super(BigInt.InvalidNumeral, self).__init__(message)
            self.base = base

    class DivisionByZero(ZeroDivisionError):
        """e.g. BigInt(1) // BigInt(0) or BigInt(1) % 0"""

    class NegativeResult(ArithmeticError):
        """e.g. BigInt(1) - BigInt(2) or BigInt(-1)"""

    class BitIndexError(IndexError):
        """e.g. BigInt(1).bit(64) with 64-bit chunks, or BigInt(1).bit(-1)"""

    class FrozenError(TypeError):
        """e.g. BigInt.ONE.set_bit(1)"""

    @classmethod
    def from_chunks(cls, chunk_values):
        """
        Construct a BigInt from a literal list of chunks, least significant first.

        assert BigInt(2**64 + 5) == BigInt.from_chunks([5, 1])
        """
        chunk_list = list(chunk_values)
        for chunk in chunk_list:
            if not isinstance(chunk, int) or not 0 <= chunk <= cls.CHUNK_MASK:
                raise ValueError("A chunk must be an int in range(2**{bits}), not {chunk}".format(
                    bits=cls.CHUNK_BITS,
                    chunk=repr(chunk),
                ))
        return_value = cls()
        return_value._chunks = chunking.trim(chunk_list)
        return return_value

    # Numerals in
    # -----------
    DECIMAL_DIGITS = '0123456789'
    BINARY_DIGITS = '01'
    HEX_DIGITS = '0123456789abcdefABCDEF'
    _digit_value = {c: int(c, 16) for c in HEX_DIGITS}

    @classmethod
    def from_numeral(cls, s):
        """
        Construct a BigInt from a decimal, hexadecimal, or binary numeral.

        assert BigInt(26) == BigInt.from_numeral('26')
        assert BigInt(26) == BigInt.from_numeral('0x1A')
        assert BigInt(26) == BigInt.from_numeral('0b1_1010')
        """
        if not isinstance(s, str):
            raise cls.ConstructorTypeError("A numeral must be a str, not {}".format(type(s).__name__))
        return_value = cls()
        return_value._chunks = cls._chunks_from_numeral(s)
        return return_value

    @classmethod
    def _chunks_from_numeral(cls, s):
        """
        Validate and convert a numeral into trimmed chunks.

        The whole string is validated before any conversion,
        so a bad character anywhere means no result at all.
        """
        if s.startswith('0b'):
            base, digits, alphabet = 2, s[2:], cls.BINARY_DIGITS
        elif s.startswith('0x'):
            base, digits, alphabet = 16, s[2:], cls.HEX_DIGITS
        else:
            base, digits, alphabet = 10, s, cls.DECIMAL_DIGITS

        strangers = [c for c in digits if c not in alphabet and c != '_']
        if strangers:
            logger.debug("Invalid base %d numeral %r, first bad character %r", base, s, strangers[0])
            raise cls.InvalidNumeral(
                "A base {base} numeral cannot contain {stranger}:  {s}".format(
                    base=base,
                    stranger=repr(strangers[0]),
                    s=repr(s),
                ),
                base,
            )
        digits = digits.replace('_', '')
        if digits == '':
            logger.debug("Invalid base %d numeral %r, no digits", base, s)
            raise cls.InvalidNumeral("A base {} numeral needs digits:  {}".format(base, repr(s)), base)

        if base == 10:
            return cls._decimal_parse(digits)._chunks
        else:
            digit_bits = 1 if base == 2 else 4
            digit_values = [cls._digit_value[c] for c in digits]
            return chunking.pack_digits(digit_values, digit_bits, cls.CHUNK_BITS)

    @classmethod
    def _decimal_parse(cls, digits):
        """
        Fold decimal digits, most significant first:  accumulator = accumulator * 10 + digit

        Each digit costs a multiply-by-ten and an add, so this is quadratic in the number of digits.
        """
        accumulator = cls()
        ten = cls(10)
        for c in digits.lstrip('0'):
            accumulator = ten * accumulator + cls(cls._digit_value[c])
        return accumulator

    # Numerals out
    # ------------
    def decimal(self):
        """
        Decimal numeral.  No leading zeros.

        assert '26' == BigInt(0x1A).decimal()

        Digits come out least significant first, by repeated division by ten.
        So this is quadratic in the number of digits.
        """
        ten = type(self)(10)
        digits = []
        value = self
        while value.bit_length() > 0:
            value, digit = value.divmod(ten)
            digits.append(self.DECIMAL_DIGITS[digit._chunks[0]])
        if len(digits) == 0:
            return '0'
        return ''.join(reversed(digits))

    def hex(self, uppercase=False):
        """
        Hexadecimal numeral, without the 0x.

        assert '1a' == BigInt(26).hex()
        assert '1A' == BigInt(26).hex(uppercase=True)

        All chunks below the top one are zero-padded to CHUNK_BITS/4 digits.
        """
        return chunking.render_chunks(self._chunks, self.CHUNK_BITS // 4, 'X' if uppercase else 'x')

    def binary(self):
        """
        Binary numeral, without the 0b.

        assert '11010' == BigInt(26).binary()

        All chunks below the top one are zero-padded to CHUNK_BITS digits.
        """
        return chunking.render_chunks(self._chunks, self.CHUNK_BITS, 'b')

    def __str__(self):
        """Handle str(BigInt(x)), decimal"""
        return self.decimal()

    def __repr__(self):
        """Handle repr(BigInt(x)), e.g. BigInt('0x1a')"""
        return "{class_name}('0x{hex}')".format(class_name=type(self).__name__, hex=self.hex())

    def __format__(self, format_spec):
        """
        Handle format(BigInt(x), spec) and '{:x}'.format(BigInt(x))

        assert '1a' == '{:x}'.format(BigInt(26))
        """
        if format_spec in ('', 'd'):
            return self.decimal()
        elif format_spec == 'x':
            return self.hex()
        elif format_spec == 'X':
            return self.hex(uppercase=True)
        elif format_spec == 'b':
            return self.binary()
        else:
            raise ValueError("Unknown format code {} for {}".format(
                repr(format_spec),
                type(self).__name__,
            ))

    # Chunks and bits
    # ---------------
    @property
    def chunks(self):
        """The chunks, least significant first, as a tuple.  assert (26,) == BigInt(26).chunks"""
        return tuple(self._chunks)

    def trim(self):
        """Remove most-significant zero chunks.  In place.  Only set_bit(i, False) can leave any."""
        chunking.trim(self._chunks)
        return self

    def bit_length(self):
        """
        Number of bits needed, not counting leading zeros.

        assert 5 == BigInt(26).bit_length()
        assert 0 == BigInt(0).bit_length()
        """
        top = self._chunks[-1]
        return (len(self._chunks) - 1) * self.CHUNK_BITS + top.bit_length()

    def is_even(self):
        """assert BigInt(26).is_even()"""
        return self._chunks[0] & 1 == 0

    def is_zero(self):
        """assert BigInt(0).is_zero()"""
        return len(self._chunks) == 1 and self._chunks[0] == 0

    def bit(self, index):
        """
        Read bit number index, 0 for the least significant.  Return 0 or 1.

        The index must be within the chunks allocated so far, even if those bits are leading zeros.
        """
        capacity = len(self._chunks) * self.CHUNK_BITS
        if not 0 <= index < capacity:
            raise self.BitIndexError("Bit {index} is outside the {capacity} bits of {me}".format(
                index=index,
                capacity=capacity,
                me=repr(self),
            ))
        chunk_index, bit_index = divmod(index, self.CHUNK_BITS)
        return (self._chunks[chunk_index] >> bit_index) & 1

    def set_bit(self, index, value=True):
        """
        Set or clear bit number index.  In place.

        The chunks grow as needed to reach the bit.  They never shrink,
        so clearing the top bit can leave zero chunks that trim() removes.
        """
        if self._frozen:
            raise self.FrozenError("Cannot set bits in a shared constant {}".format(repr(self)))
        if index < 0:
            raise self.BitIndexError("Bit index cannot be negative:  {}".format(index))
        chunk_index, bit_index = divmod(index, self.CHUNK_BITS)
        if chunk_index >= len(self._chunks):
            self._chunks.extend([0] * (chunk_index + 1 - len(self._chunks)))
        mask = 1 << bit_index
        if value:
            self._chunks[chunk_index] |= mask
        else:
            self._chunks[chunk_index] &= ~mask

    def __int__(self):
        """Convert to a native int."""
        return chunking.int_from_chunks(self._chunks, self.CHUNK_BITS)

    def __bool__(self):
        """Handle bool(BigInt(x)).  assert not BigInt(0)"""
        return not self.is_zero()

    def __hash__(self):
        """Same as a native int of the same value, so BigInt(42) and 42 are interchangeable dict keys."""
        return hash(int(self))

    # Operands
    # --------
    @classmethod
    def _coerce(cls, x):
        """
        Get an operand ready for arithmetic with an instance of cls.

        Same chunk width passes through.  Other widths and non-negative ints convert.
        Anything else is NotImplemented, so Python can try the other operand.
        """
        if isinstance(x, BigInt):
            if x.CHUNK_BITS == cls.CHUNK_BITS:
                return x
            else:
                return cls(x)
        elif isinstance(x, int) and x >= 0:
            return cls(x)
        else:
            return NotImplemented

    @classmethod
    def _operand(cls, x):
        """Like _coerce() but for explicit method calls, where a bad operand is an error."""
        if isinstance(x, int) and x < 0:
            raise cls.NegativeResult("{} cannot represent {}".format(cls.__name__, x))
        operand = cls._coerce(x)
        if operand is NotImplemented:
            raise cls.ConstructorTypeError("Expecting a {} or int, not a {}".format(
                cls.__name__,
                type(x).__name__,
            ))
        return operand

    def _new(self, chunks):
        """An instance of the same class with these (trimmed) chunks."""
        return_value = type(self)()
        return_value._chunks = chunks
        return return_value

    # Comparison
    # ----------
    def _compare(self, other):
        """Three-way comparison.  Both sides must be trimmed."""
        return chunking.compare_chunks(self._chunks, other._chunks)

    def __eq__(self, other):
        """Handle BigInt(x) == something"""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) == 0

    def __ne__(self, other):
        """Handle BigInt(x) != something"""
        eq_result = self.__eq__(other)
        if eq_result is NotImplemented:
            return NotImplemented
        return not eq_result

    def __lt__(self, other): return self._compare_op(other, lambda c: c <  0)
    def __le__(self, other): return self._compare_op(other, lambda c: c <= 0)
    def __gt__(self, other): return self._compare_op(other, lambda c: c >  0)
    def __ge__(self, other): return self._compare_op(other, lambda c: c >= 0)

    def _compare_op(self, other, test):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return test(self._compare(other))

    # Math
    # ----
    def __add__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._new(chunking.add_chunks(self._chunks, other._chunks, self.CHUNK_BITS))

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        difference, borrow = chunking.subtract_chunks(self._chunks, other._chunks, self.CHUNK_BITS)
        if borrow != 0:
            logger.debug("Negative difference %r - %r", self, other)
            raise self.NegativeResult("{} - {} would be negative".format(repr(self), repr(other)))
        return self._new(difference)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._shift_and_add(self, other)

    def sq(self):
        """Square.  assert BigInt(100) == BigInt(10).sq()"""
        return self._shift_and_add(self, self)

    @staticmethod
    def _shift_and_add(multiplier, multiplicand):
        """
        Multiply by scanning the multiplier's bits, least significant first.

        Each 1 bit at position p adds multiplicand << p to the product.
        The result has the class of the multiplier.
        """
        product = type(multiplier)()
        for position in range(multiplier.bit_length()):
            if multiplier.bit(position):
                product = product + (multiplicand << position)
        return product

    def divmod(self, divisor):
        """
        Quotient and remainder, by restoring binary long division.

        assert (BigInt(142), BigInt(6)) == BigInt(1000).divmod(7)

        Walk the dividend's bits, most significant first, into a running remainder.
        Whenever the remainder reaches the divisor, subtract it and set that quotient bit.
        """
        divisor = self._operand(divisor)
        if divisor.is_zero():
            logger.debug("Division of %r by zero", self)
            raise self.DivisionByZero("{} cannot be divided by zero".format(repr(self)))
        quotient = type(self)()
        remainder = type(self)()
        for index in reversed(range(self.bit_length())):
            remainder = remainder << 1
            if self.bit(index):
                remainder.set_bit(0)
            if remainder >= divisor:
                remainder = remainder - divisor
                quotient.set_bit(index)
        return quotient.trim(), remainder

    def __floordiv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.divmod(other)[0]

    def __truediv__(self, other):
        """
        Handle BigInt(x) / something

        There are no fractional BigInt values, so single-slash division is floor division.
        assert BigInt(142) == BigInt(1000) / BigInt(7)
        """
        return self.__floordiv__(other)

    def __mod__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.divmod(other)[1]

    def __divmod__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.divmod(other)

    def __radd__(self, other): return self._reflected(operator_name='__add__', other=other)
    def __rsub__(self, other): return self._reflected(operator_name='__sub__', other=other)
    def __rmul__(self, other): return self._reflected(operator_name='__mul__', other=other)
    def __rfloordiv__(self, other): return self._reflected(operator_name='__floordiv__', other=other)
    def __rtruediv__(self, other): return self._reflected(operator_name='__truediv__', other=other)
    def __rmod__(self, other): return self._reflected(operator_name='__mod__', other=other)
    def __rdivmod__(self, other): return self._reflected(operator_name='__divmod__', other=other)
    def __rpow__(self, other): return self._reflected(operator_name='__pow__', other=other)

    def _reflected(self, operator_name, other):
        """Handle something + BigInt(x) etc. when something is an int."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return getattr(other, operator_name)(self)

    def __lshift__(self, count):
        count = self._shift_count(count)
        if count is NotImplemented:
            return NotImplemented
        return self._new(chunking.shift_left_chunks(self._chunks, count, self.CHUNK_BITS))

    def __rshift__(self, count):
        count = self._shift_count(count)
        if count is NotImplemented:
            return NotImplemented
        return self._new(chunking.shift_right_chunks(self._chunks, count, self.CHUNK_BITS))

    @staticmethod
    def _shift_count(count):
        """Shift counts are native ints, or a BigInt converted to one."""
        if isinstance(count, BigInt):
            return int(count)
        elif isinstance(count, int):
            if count < 0:
                raise ValueError("negative shift count")
            return count
        else:
            return NotImplemented

    # Exponentiation
    # --------------
    def pow(self, exponent):
        """
        Raise to a power, by square-and-multiply.

        assert BigInt(1024) == BigInt(2).pow(10)

        Consume the exponent one bit at a time, least significant first.
        The base is squared for each bit, and multiplied into the result for each 1 bit.
        """
        exponent = self._operand(exponent)
        result = type(self)(1)
        base = type(self)(self)
        while not exponent.is_zero():
            if not exponent.is_even():
                result = result * base
            exponent = exponent >> 1
            if not exponent.is_zero():
                base = base.sq()
        return result

    def modpow(self, exponent, modulus):
        """
        Raise to a power, modulo a modulus.  Same as self.pow(exponent) % modulus, only faster.

        assert BigInt(4) == BigInt(3).modpow(4, 7)

        Same square-and-multiply as pow(), but reduced modulo the modulus at every step.
        The running time depends on the exponent's bits.  Keep secrets out of it.
        """
        exponent = self._operand(exponent)
        modulus = self._operand(modulus)
        result = type(self)(1) % modulus
        base = self % modulus
        while not exponent.is_zero():
            if not exponent.is_even():
                result = (result * base) % modulus
            exponent = exponent >> 1
            base = base.sq() % modulus
        return result

    def __pow__(self, exponent, modulus=None):
        """Handle BigInt(x) ** e and pow(BigInt(x), e, m)"""
        exponent = self._coerce(exponent)
        if exponent is NotImplemented:
            return NotImplemented
        if modulus is None:
            return self.pow(exponent)
        modulus = self._coerce(modulus)
        if modulus is NotImplemented:
            return NotImplemented
        return self.modpow(exponent, modulus)

    @classmethod
    def gcd(cls, a, b):
        """
        Greatest common divisor, by Euclid's algorithm.

        assert BigInt(6) == BigInt.gcd(48, 18)

        A loop, not recursion, so the stack doesn't care how big the numbers are.
        The result is always a new instance, never one of the arguments.
        """
        a = cls._operand(a)
        b = cls._operand(b)
        while not a.is_zero():
            a, b = b % a, a
        return cls(b)

    # Constants
    # ---------
    ZERO = None
    ONE = None
    TWO = None
    TEN = None

    def _freeze(self):
        self._frozen = True
        return self

    @classmethod
    def internal_setup(cls):
        """
        Initialize constants after the class is defined.

        Call this again for any subclass that changes CHUNK_BITS.
        """
        if cls.CHUNK_BITS <= 0 or cls.CHUNK_BITS % 4 != 0:
            raise ValueError("CHUNK_BITS must be a positive multiple of 4, not {}".format(cls.CHUNK_BITS))
        cls.CHUNK_MASK = chunking.chunk_mask(cls.CHUNK_BITS)
        cls.ZERO = cls(0)._freeze()
        cls.ONE = cls(1)._freeze()
        cls.TWO = cls(2)._freeze()
        cls.TEN = cls(10)._freeze()


BigInt.internal_setup()
assert BigInt.TEN.chunks == (10,)


class BigInt8(BigInt):
    """
    Same BigInt, with 8-bit chunks.

    Many more chunks for the same value.  Good for seeing carries, borrows,
    and chunk boundaries in small numbers.

        assert (0x34, 0x12) == BigInt8(0x1234).chunks
    """
    __slots__ = ()

    CHUNK_BITS = 8


BigInt8.internal_setup()
assert BigInt8(0x1234).chunks == (0x34, 0x12)


def zero():
    """The shared BigInt zero.  Never modified."""
    return BigInt.ZERO


def one():
    """The shared BigInt one.  Never modified."""
    return BigInt.ONE


def two():
    """The shared BigInt two.  Never modified."""
    return BigInt.TWO


def ten():
    """The shared BigInt ten.  Never modified."""
    return BigInt.TEN


def gcd(a, b):
    """
    Greatest common divisor of two BigInts (or ints).

    The result has the chunk width of a if it is a BigInt, otherwise of b, otherwise 64 bits.
    """
    if isinstance(a, BigInt):
        return type(a).gcd(a, b)
    elif isinstance(b, BigInt):
        return type(b).gcd(a, b)
    else:
        return BigInt.gcd(a, b)
