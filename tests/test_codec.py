import unittest
from axioplan import codec
from axioplan.errors import InvalidNumber, InvalidResponse, InvalidUTF8, OutOfRange


class TestDecimal(unittest.TestCase):

    def test_decode(self):
        self.assertEqual(codec.decode_decimal(b"0"), 0)
        self.assertEqual(codec.decode_decimal(b"255", max_value=255), 255)

    def test_invalid_utf8(self):
        with self.assertRaises(InvalidUTF8):
            codec.decode_decimal(b"\xff\xfe")

    def test_not_a_number(self):
        for payload in (b"", b"abc", b"-1", b"1.5", b" 2"):
            with self.assertRaises(InvalidNumber):
                codec.decode_decimal(payload)

    def test_oversized_payload(self):
        """Runaway digit strings from a desynced line stay typed errors."""
        with self.assertRaises(InvalidNumber):
            codec.decode_decimal(b"1" * 5000, max_value=255)

    def test_exceeds_max(self):
        with self.assertRaises(InvalidNumber):
            codec.decode_decimal(b"256", max_value=255)


class TestZeiss(unittest.TestCase):

    def test_sign_transform(self):
        self.assertEqual(codec.zeiss_to_int(0x7FFFFF), 0x7FFFFF)
        self.assertEqual(codec.zeiss_to_int(0x800000), -0x7FFFFF)
        self.assertEqual(codec.zeiss_to_int(0xFFFFFE), -1)
        # Not two's complement: all ones is zero
        self.assertEqual(codec.zeiss_to_int(0xFFFFFF), 0)
        self.assertEqual(codec.int_to_zeiss(-1), 0xFFFFFE)
        self.assertEqual(codec.int_to_zeiss(5), 5)

    def test_decode(self):
        self.assertEqual(codec.decode_zeiss(b"000000"), 0)
        self.assertEqual(codec.decode_zeiss(b"7FFFFF"), 0x7FFFFF)
        self.assertEqual(codec.decode_zeiss(b"fffffe"), -1)

    def test_encode(self):
        self.assertEqual(codec.encode_zeiss(0), "000000")
        self.assertEqual(codec.encode_zeiss(255), "0000FF")
        self.assertEqual(codec.encode_zeiss(-1), "FFFFFE")

    def test_round_trip_sample(self):
        """Checked value by value; the transform pair is not a true inverse."""
        for n in (0, 1, 1000, 0x123456, 0x7FFFFF, -1, -2, -1000, -0xFFFFF, -0x100000):
            self.assertEqual(codec.decode_zeiss(codec.encode_zeiss(n).encode()), n)

    def test_large_negative_folds(self):
        # OR with 0xF00000 discards bit 21 and up
        self.assertEqual(codec.encode_zeiss(-0x200000), "EFFFFF")
        self.assertEqual(codec.decode_zeiss(b"EFFFFF"), -0x100000)

    def test_encode_out_of_range(self):
        for n in (0x1000000, -(1 << 30)):
            with self.assertRaises(OutOfRange):
                codec.encode_zeiss(n)

    def test_decode_bad_hex(self):
        for payload in (b"GGGGGG", b"00000", b"\xff\x00"):
            with self.assertRaises(InvalidNumber):
                codec.decode_zeiss(payload)

    def test_decode_wrong_width(self):
        for payload in (b"", b"0000", b"00000000"):
            with self.assertRaises(InvalidResponse):
                codec.decode_zeiss(payload)


class TestMicrometers(unittest.TestCase):

    def test_steps_to_um(self):
        self.assertAlmostEqual(codec.steps_to_um(20, 0.05), 1.0)
        self.assertAlmostEqual(codec.steps_to_um(-3, 0.05), -0.15)

    def test_truncates_toward_zero(self):
        self.assertEqual(codec.um_to_steps(0.07, 0.05), 1)
        self.assertEqual(codec.um_to_steps(-0.07, 0.05), -1)

    def test_round_trip_within_one_step(self):
        for um in (0.0, 0.049, 1.0, 12.34, -7.77, 100.025, 419430.0):
            back = codec.steps_to_um(codec.um_to_steps(um, 0.05), 0.05)
            self.assertLessEqual(abs(back - um), 0.05)

if __name__ == '__main__':
    unittest.main()
