"""
bigchunk - Unsigned integers of any size, one chunk at a time.

Usage example:

    import bigchunk

    n = bigchunk.BigInt('0x1A')
    assert '26' == str(n)
    assert '1a' == n.hex()
    assert '11010' == n.binary()

Usage example:

    from bigchunk import BigInt, gcd

    assert BigInt(6) == gcd(BigInt(48), BigInt(18))
    assert BigInt(4) == pow(BigInt(3), 4, 7)
"""

from .bigint import BigInt
from .bigint import BigInt8
from .bigint import gcd
from .bigint import zero
from .bigint import one
from .bigint import two
from .bigint import ten

__all__ = [
    'BigInt',
    'BigInt8',
    'gcd',
    'zero',
    'one',
    'two',
    'ten',
]

from . import version
__version__ = version.__doc__
