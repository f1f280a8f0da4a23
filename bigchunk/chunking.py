"""
Helpers for little-endian lists of fixed-width unsigned chunks.

A chunk list represents the integer sum(chunks[i] << (i * bits)).
chunks[0] is the least significant chunk.  Every chunk is in range(1 << bits).

These functions work on plain Python lists of ints.  BigInt wraps them.
Each function that cares about chunk width takes it as its bits parameter,
so the same code serves 64-bit chunks, 8-bit chunks, or any multiple of 4.
"""


def chunk_mask(bits):
    """The largest value one chunk can hold.  Same as (2**bits)-1"""
    return (1 << bits) - 1
assert 0xFF == chunk_mask(8)
assert 0xFFFFFFFFFFFFFFFF == chunk_mask(64)


def chunk_at(chunks, index):
    """Get one chunk, reading past the most significant end as zero."""
    if index < len(chunks):
        return chunks[index]
    else:
        return 0
assert 0x12 == chunk_at([0x34, 0x12], 1)
assert 0x00 == chunk_at([0x34, 0x12], 2)


def trim(chunks):
    """
    Remove most-significant zero chunks, in place.  Also return the list.

    Never trims below one chunk.  Zero is [0], never [].
    """
    while len(chunks) > 1 and chunks[-1] == 0:
        chunks.pop()
    if len(chunks) == 0:
        chunks.append(0)
    return chunks
assert [0x05, 0x01] == trim([0x05, 0x01, 0x00, 0x00])
assert [0] == trim([0, 0, 0])
assert [0] == trim([])


def chunks_from_int(i, bits):
    """Split a non-negative native integer into chunks, least significant first."""
    assert i >= 0
    mask = chunk_mask(bits)
    chunks = []
    while True:
        chunks.append(i & mask)
        i >>= bits
        if i == 0:
            return chunks
assert [0x34, 0x12] == chunks_from_int(0x1234, 8)
assert [0] == chunks_from_int(0, 8)


def int_from_chunks(chunks, bits):
    """Join chunks into a native integer.  Inverse of chunks_from_int()."""
    return_value = 0
    for chunk in reversed(chunks):
        return_value <<= bits
        return_value |= chunk
    return return_value
assert 0x1234 == int_from_chunks([0x34, 0x12], 8)


def add_chunks(a, b, bits):
    """
    Chunk-wise sum, carrying into the next chunk.

    A carry out of the most significant position becomes a new chunk.
    Trimmed inputs make a trimmed output.
    """
    mask = chunk_mask(bits)
    out = []
    carry = 0
    for index in range(max(len(a), len(b))):
        total = chunk_at(a, index) + chunk_at(b, index) + carry
        out.append(total & mask)
        carry = total >> bits
    if carry != 0:
        out.append(carry)
    return out
assert [0x00, 0x00, 0x01] == add_chunks([0xFF, 0xFF], [0x01], 8)
assert [0x03] == add_chunks([0x01], [0x02], 8)


def subtract_chunks(a, b, bits):
    """
    Chunk-wise difference, borrowing from the next chunk.

    Return a tuple of the trimmed difference and the final borrow.
    A borrow of 1 means b was bigger than a, and the difference wrapped around.
    Deciding what to do about that is up to the caller.
    """
    radix = 1 << bits
    out = []
    borrow = 0
    for index in range(max(len(a), len(b))):
        difference = chunk_at(a, index) - chunk_at(b, index) - borrow
        if difference < 0:
            difference += radix
            borrow = 1
        else:
            borrow = 0
        out.append(difference)
    return trim(out), borrow
assert ([0xFF, 0xFF], 0) == subtract_chunks([0x00, 0x00, 0x01], [0x01], 8)
assert ([0xFF], 1) == subtract_chunks([0x00], [0x01], 8)


def compare_chunks(a, b):
    """
    Three-way magnitude comparison:  -1 if a < b, 0 if a == b, +1 if a > b

    Both must be trimmed.  The longer list is the bigger number, otherwise
    the most significant chunk that differs decides.
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else +1
    for chunk_a, chunk_b in zip(reversed(a), reversed(b)):
        if chunk_a != chunk_b:
            return -1 if chunk_a < chunk_b else +1
    return 0
assert +1 == compare_chunks([0x00, 0x01], [0xFF])
assert -1 == compare_chunks([0xFF, 0x01], [0x00, 0x02])
assert  0 == compare_chunks([0x07], [0x07])


def shift_left_chunks(chunks, count, bits):
    """
    Shift toward the most significant end by count bits.  Same as n * 2**count

    Bits that fall off the top of a chunk move into the bottom of the next one.
    Then whole zero chunks are inserted at the least significant end.
    """
    whole_chunks, part_bits = divmod(count, bits)
    out = list(chunks)
    if part_bits != 0:
        mask = chunk_mask(bits)
        overflow = 0
        for index in range(len(out)):
            spill = out[index] >> (bits - part_bits)
            out[index] = ((out[index] << part_bits) & mask) | overflow
            overflow = spill
        if overflow != 0:
            out.append(overflow)
    return trim([0] * whole_chunks + out)
assert [0x02, 0x01] == shift_left_chunks([0x81], 1, 8)
assert [0x00, 0x02] == shift_left_chunks([0x01], 9, 8)
assert [0] == shift_left_chunks([0], 16, 8)


def shift_right_chunks(chunks, count, bits):
    """
    Shift toward the least significant end by count bits.  Same as n // 2**count

    Whole chunks are dropped from the least significant end first.
    Then bits that fall off the bottom of a chunk move into the top of the one below it.
    """
    whole_chunks, part_bits = divmod(count, bits)
    if whole_chunks >= len(chunks):
        return [0]
    out = list(chunks[whole_chunks:])
    if part_bits != 0:
        low_mask = chunk_mask(part_bits)
        underflow = 0
        for index in reversed(range(len(out))):
            spill = out[index] & low_mask
            out[index] = (out[index] >> part_bits) | (underflow << (bits - part_bits))
            underflow = spill
    return trim(out)
assert [0x81] == shift_right_chunks([0x02, 0x01], 1, 8)
assert [0x12] == shift_right_chunks([0x34, 0x12], 8, 8)
assert [0] == shift_right_chunks([0x34, 0x12], 16, 8)


def pack_digits(digit_values, digit_bits, bits):
    """
    Pack power-of-two digits into chunks, e.g. hex digits (digit_bits=4) or binary (1).

    digit_values are in reading order, most significant first.
    Grouping starts at the least significant (rightmost) digit, so only the
    most significant chunk can come up short, and it is implicitly zero-filled.
    """
    assert bits % digit_bits == 0
    digits_per_chunk = bits // digit_bits
    chunks = []
    end = len(digit_values)
    while end > 0:
        start = max(0, end - digits_per_chunk)
        chunk = 0
        for digit_value in digit_values[start:end]:
            chunk = (chunk << digit_bits) | digit_value
        chunks.append(chunk)
        end = start
    return trim(chunks)
assert [0x23, 0x01] == pack_digits([0x1, 0x2, 0x3], 4, 8)
assert [0x05] == pack_digits([1, 0, 1], 1, 8)


def render_chunks(chunks, width, format_spec):
    """
    Render chunks most significant first, e.g. in hex ('x' or 'X') or binary ('b').

    The top chunk has no leading zeros.  Every chunk below it is zero-padded to
    exactly width digits.  That padding is how the chunk boundaries survive.
    """
    padded_spec = '0{width}{spec}'.format(width=width, spec=format_spec)
    top = format(chunks[-1], format_spec)
    lower = [format(chunk, padded_spec) for chunk in reversed(chunks[:-1])]
    return top + ''.join(lower)
assert '1004' == render_chunks([0x04, 0x10], 2, 'x')
assert '1AB' == render_chunks([0xAB, 0x01], 2, 'X')
assert '100000100' == render_chunks([0x04, 0x01], 8, 'b')
assert '0' == render_chunks([0], 2, 'x')
