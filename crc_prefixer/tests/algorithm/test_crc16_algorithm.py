import random
import unittest
from unittest import mock

from crc_prefixer.algorithm.crc16_algorithm import Crc16Algorithm
from crc_prefixer.algorithm.crc16_table import Crc16Table


class TestCrc16Table(unittest.TestCase):
    def test_known_entries(self):
        table = Crc16Table()
        self.assertEqual(len(table), 256)
        self.assertEqual(table[0x00], 0x0000)
        self.assertEqual(table[0x01], 0x1021)
        self.assertEqual(table[0x02], 0x2042)
        self.assertEqual(table[0xFF], 0x1EF0)

    def test_rebuild_is_identical(self):
        first, second = Crc16Table(), Crc16Table()
        self.assertIsNot(first, second)
        self.assertEqual(first.entries, second.entries)
        self.assertEqual(first, second)
        self.assertEqual(hash(first), hash(second))

    def test_entries_match_bit_loop(self):
        table = Crc16Table()
        for k in range(256):
            self.assertEqual(table[k], Crc16Algorithm.calculate_bitwise(bytes([k])), f"entry {k:#04x}")

    def test_entries_are_immutable(self):
        table = Crc16Table()
        with self.assertRaises(TypeError):
            table.entries[0] = 1


class TestCrc16Algorithm(unittest.TestCase):
    def setUp(self):
        self.crc = Crc16Algorithm()

    def test_catalogue_check_values(self):
        self.assertEqual(self.crc.calculate(b"123456789"), 0x31C3)  # CRC-16/XMODEM
        self.assertEqual(self.crc.calculate(b"123456789", 0xFFFF), 0x29B1)  # CRC-16/IBM-3740
        self.assertEqual(self.crc.calculate(b"123456789", 0x1D0F), 0xE5CC)  # CRC-16/SPI-FUJITSU
        self.assertEqual(self.crc.calculate(b"", 0xFFFF), 0xFFFF)

    def test_table_matches_bitwise(self):
        rng = random.Random(0x1021)
        for _ in range(200):
            data = bytes(rng.randrange(256) for _ in range(rng.randrange(40)))
            seed = rng.randrange(0x10000)
            self.assertEqual(self.crc.calculate(data, seed), Crc16Algorithm.calculate_bitwise(data, seed))

    def test_step_matches_calculate(self):
        crc = 0xBEEF
        for byte_val in b"step":
            crc = self.crc.step(crc, byte_val)
        self.assertEqual(crc, self.crc.calculate(b"step", 0xBEEF))

    def test_shared_table(self):
        table = Crc16Table()
        a, b = Crc16Algorithm(table), Crc16Algorithm(table)
        self.assertIs(a.table, b.table)
        self.assertEqual(a.calculate(b"shared"), b.calculate(b"shared"))

    def test_prefix_equals_zero_message(self):
        for length in (0, 1, 2, 10, 257):
            for seed in (0x0000, 0x0001, 0x8000, 0xFFFF, 0x1234):
                self.assertEqual(self.crc.prefix(seed, length), self.crc.calculate(bytes(length), seed))

    def test_prefix_zero_length_is_identity(self):
        for seed in (0, 1, 0xABCD, 0xFFFF):
            self.assertEqual(self.crc.prefix(seed, 0), seed)

    def test_prefix_is_linear(self):
        rng = random.Random(7)
        for _ in range(100):
            a, b = rng.randrange(0x10000), rng.randrange(0x10000)
            length = rng.randrange(64)
            self.assertEqual(self.crc.prefix(a ^ b, length),
                             self.crc.prefix(a, length) ^ self.crc.prefix(b, length))

    def test_appended_checksum_verifies_to_zero(self):
        body = bytes([0x12, 0x34])
        crc = self.crc.calculate(body)
        self.assertEqual(self.crc.calculate(body + crc.to_bytes(2, 'big')), 0)

    def test_calculate_and_prefix_clock_one_step_per_byte(self):
        with mock.patch.object(self.crc, 'step', wraps=self.crc.step) as step:
            self.assertEqual(self.crc.calculate(b"123456789", 0xFFFF), 0x29B1)
            self.assertEqual(step.call_count, 9)
            self.assertEqual(step.call_args_list[0], mock.call(0xFFFF, ord("1")))

            step.reset_mock()
            self.assertEqual(self.crc.prefix(0x1234, 4), self.crc.calculate(bytes(4), 0x1234))
            self.assertEqual(step.call_count, 8)
            self.assertEqual(step.call_args_list[0], mock.call(0x1234, 0))

    def test_invalid_arguments(self):
        with self.assertRaises(ValueError):
            self.crc.calculate(b"x", 0x10000)
        with self.assertRaises(ValueError):
            Crc16Algorithm.calculate_bitwise(b"x", -1)
        with self.assertRaises(ValueError):
            self.crc.prefix(0, -1)


if __name__ == '__main__':
    unittest.main()
