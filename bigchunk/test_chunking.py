"""
Unit tests for the chunk-list helpers in chunking.py

Mostly 8-bit chunks, so carries and borrows show up in small numbers.
"""

import unittest

from bigchunk import chunking


class ChunkTrimTests(unittest.TestCase):

    def test_trim_leading_zeros(self):
        self.assertEqual([0x01, 0x02], chunking.trim([0x01, 0x02, 0x00, 0x00]))

    def test_trim_in_place(self):
        chunks = [0x07, 0x00]
        chunking.trim(chunks)
        self.assertEqual([0x07], chunks)

    def test_trim_zero(self):
        self.assertEqual([0], chunking.trim([0, 0, 0, 0]))
        self.assertEqual([0], chunking.trim([0]))
        self.assertEqual([0], chunking.trim([]))

    def test_trim_leaves_inner_zeros(self):
        self.assertEqual([0x00, 0x00, 0x01], chunking.trim([0x00, 0x00, 0x01]))

    def test_chunk_at(self):
        self.assertEqual(0x34, chunking.chunk_at([0x34, 0x12], 0))
        self.assertEqual(0x12, chunking.chunk_at([0x34, 0x12], 1))
        self.assertEqual(0x00, chunking.chunk_at([0x34, 0x12], 99))


class ChunkIntConversionTests(unittest.TestCase):

    def test_chunks_from_int(self):
        self.assertEqual([0x78, 0x56, 0x34, 0x12], chunking.chunks_from_int(0x12345678, 8))
        self.assertEqual([0x12345678], chunking.chunks_from_int(0x12345678, 64))
        self.assertEqual([0, 1], chunking.chunks_from_int(2**64, 64))
        self.assertEqual([0], chunking.chunks_from_int(0, 64))

    def test_int_from_chunks(self):
        self.assertEqual(0x12345678, chunking.int_from_chunks([0x78, 0x56, 0x34, 0x12], 8))
        self.assertEqual(2**64, chunking.int_from_chunks([0, 1], 64))
        self.assertEqual(0, chunking.int_from_chunks([0], 8))

    def test_googol(self):
        googol_chunks = chunking.chunks_from_int(10**100, 64)
        self.assertEqual(6, len(googol_chunks))
        self.assertEqual(10**100, chunking.int_from_chunks(googol_chunks, 64))


class ChunkAddSubtractTests(unittest.TestCase):

    def test_add_no_carry(self):
        self.assertEqual([0x03, 0x05], chunking.add_chunks([0x01, 0x02], [0x02, 0x03], 8))

    def test_add_carry_ripples(self):
        self.assertEqual([0x00, 0x00, 0x01], chunking.add_chunks([0xFF, 0xFF], [0x01], 8))

    def test_add_carry_into_longer(self):
        self.assertEqual([0x00, 0x02], chunking.add_chunks([0x80], [0x80, 0x01], 8))

    def test_add_64_bit_carry(self):
        self.assertEqual([0, 1], chunking.add_chunks([2**64 - 1], [1], 64))

    def test_subtract_no_borrow(self):
        self.assertEqual(([0x01, 0x01], 0), chunking.subtract_chunks([0x03, 0x05], [0x02, 0x04], 8))

    def test_subtract_borrow_ripples(self):
        self.assertEqual(([0xFF, 0xFF], 0), chunking.subtract_chunks([0x00, 0x00, 0x01], [0x01], 8))

    def test_subtract_to_zero(self):
        self.assertEqual(([0], 0), chunking.subtract_chunks([0x34, 0x12], [0x34, 0x12], 8))

    def test_subtract_underflow_reports_borrow(self):
        difference, borrow = chunking.subtract_chunks([0x01], [0x02], 8)
        self.assertEqual(1, borrow)
        self.assertEqual([0xFF], difference)


class ChunkCompareTests(unittest.TestCase):

    def test_compare_length_first(self):
        self.assertEqual(+1, chunking.compare_chunks([0x00, 0x01], [0xFF]))
        self.assertEqual(-1, chunking.compare_chunks([0xFF], [0x00, 0x01]))

    def test_compare_most_significant_first(self):
        self.assertEqual(-1, chunking.compare_chunks([0xFF, 0x01], [0x00, 0x02]))
        self.assertEqual(+1, chunking.compare_chunks([0x00, 0x02], [0xFF, 0x01]))
        self.assertEqual(+1, chunking.compare_chunks([0x02, 0x01], [0x01, 0x01]))

    def test_compare_equal(self):
        self.assertEqual(0, chunking.compare_chunks([0x34, 0x12], [0x34, 0x12]))
        self.assertEqual(0, chunking.compare_chunks([0], [0]))


class ChunkShiftTests(unittest.TestCase):

    def test_shift_left_within_chunk(self):
        self.assertEqual([0x0A], chunking.shift_left_chunks([0x05], 1, 8))

    def test_shift_left_spills_into_new_chunk(self):
        self.assertEqual([0x02, 0x01], chunking.shift_left_chunks([0x81], 1, 8))

    def test_shift_left_spills_between_chunks(self):
        self.assertEqual([0xF0, 0xFF, 0x0F], chunking.shift_left_chunks([0xFF, 0xFF], 4, 8))

    def test_shift_left_whole_chunks(self):
        self.assertEqual([0x00, 0x00, 0x34, 0x12], chunking.shift_left_chunks([0x34, 0x12], 16, 8))

    def test_shift_left_whole_and_part(self):
        self.assertEqual([0x00, 0x02], chunking.shift_left_chunks([0x01], 9, 8))

    def test_shift_left_zero_stays_trimmed(self):
        self.assertEqual([0], chunking.shift_left_chunks([0], 16, 8))
        self.assertEqual([0], chunking.shift_left_chunks([0], 3, 8))

    def test_shift_left_does_not_mutate(self):
        chunks = [0x81]
        chunking.shift_left_chunks(chunks, 1, 8)
        self.assertEqual([0x81], chunks)

    def test_shift_right_within_chunk(self):
        self.assertEqual([0x02], chunking.shift_right_chunks([0x05], 1, 8))

    def test_shift_right_pulls_from_above(self):
        self.assertEqual([0x81], chunking.shift_right_chunks([0x02, 0x01], 1, 8))

    def test_shift_right_whole_chunks(self):
        self.assertEqual([0x12], chunking.shift_right_chunks([0x34, 0x12], 8, 8))

    def test_shift_right_everything(self):
        self.assertEqual([0], chunking.shift_right_chunks([0x34, 0x12], 16, 8))
        self.assertEqual([0], chunking.shift_right_chunks([0x34, 0x12], 1000, 8))
        self.assertEqual([0], chunking.shift_right_chunks([0x34, 0x12], 13, 8))

    def test_shift_right_64(self):
        self.assertEqual([2**63], chunking.shift_right_chunks([0, 1], 1, 64))

    def test_shift_zero_bits(self):
        self.assertEqual([0x34, 0x12], chunking.shift_left_chunks([0x34, 0x12], 0, 8))
        self.assertEqual([0x34, 0x12], chunking.shift_right_chunks([0x34, 0x12], 0, 8))


class ChunkNumeralTests(unittest.TestCase):

    def test_pack_hex_digits(self):
        self.assertEqual([0x34, 0x12], chunking.pack_digits([0x1, 0x2, 0x3, 0x4], 4, 8))
        self.assertEqual([0x23, 0x01], chunking.pack_digits([0x1, 0x2, 0x3], 4, 8))
        self.assertEqual([0x1234], chunking.pack_digits([0x1, 0x2, 0x3, 0x4], 4, 64))

    def test_pack_binary_digits(self):
        self.assertEqual([0x00, 0x01], chunking.pack_digits([1, 0, 0, 0, 0, 0, 0, 0, 0], 1, 8))
        self.assertEqual([0x1A], chunking.pack_digits([1, 1, 0, 1, 0], 1, 8))

    def test_pack_leading_zero_digits(self):
        self.assertEqual([0x01], chunking.pack_digits([0, 0, 0, 0, 0, 1], 4, 8))
        self.assertEqual([0], chunking.pack_digits([0, 0, 0], 4, 8))

    def test_render_hex(self):
        self.assertEqual('1a', chunking.render_chunks([0x1A], 2, 'x'))
        self.assertEqual('1A', chunking.render_chunks([0x1A], 2, 'X'))
        self.assertEqual('1004', chunking.render_chunks([0x04, 0x10], 2, 'x'))
        self.assertEqual('10000000000000000', chunking.render_chunks([0, 1], 16, 'x'))

    def test_render_binary(self):
        self.assertEqual('11010', chunking.render_chunks([0x1A], 8, 'b'))
        self.assertEqual('100000100', chunking.render_chunks([0x04, 0x01], 8, 'b'))

    def test_render_zero(self):
        self.assertEqual('0', chunking.render_chunks([0], 16, 'x'))
        self.assertEqual('0', chunking.render_chunks([0], 64, 'b'))


if __name__ == '__main__':
    import unittest
    unittest.main()
