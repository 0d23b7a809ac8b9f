import unittest

from helpers import FakeProcess
from memory_reader import (
    MemoryReadError,
    parse_offsets,
    read_int32,
    read_quantity,
    read_utf16_string,
    resolve_pointer_chain,
)


BASE = 0x140000000


class PointerChainTests(unittest.TestCase):
    def setUp(self) -> None:
        self.process = FakeProcess()
        # [[base + 0x100] + 0x10] + 0x8
        self.process.write_pointer(BASE + 0x100, 0x2000)
        self.process.write_pointer(0x2000 + 0x10, 0x3000)
        self.process.write_int32(0x3000 + 0x8, 1234)

    def test_follows_chain_to_final_address(self) -> None:
        address = resolve_pointer_chain(self.process, BASE, (0x100, 0x10, 0x8))
        self.assertEqual(address, 0x3008)
        self.assertEqual(read_int32(self.process, address), 1234)

    def test_single_offset_is_relative_to_base(self) -> None:
        self.assertEqual(resolve_pointer_chain(self.process, BASE, (0x100,)), BASE + 0x100)

    def test_empty_chain_fails(self) -> None:
        with self.assertRaises(MemoryReadError):
            resolve_pointer_chain(self.process, BASE, ())

    def test_unreadable_pointer_fails(self) -> None:
        with self.assertRaises(MemoryReadError):
            resolve_pointer_chain(self.process, BASE, (0x200, 0x10, 0x8))

    def test_null_pointer_fails(self) -> None:
        self.process.write_pointer(BASE + 0x300, 0)
        with self.assertRaises(MemoryReadError):
            resolve_pointer_chain(self.process, BASE, (0x300, 0x10))

    def test_read_quantity_returns_none_on_failure(self) -> None:
        self.assertEqual(read_quantity(self.process, BASE, (0x100, 0x10, 0x8)), 1234)
        self.assertIsNone(read_quantity(self.process, BASE, (0x100, 0x10, 0x20)))
        self.assertIsNone(read_quantity(self.process, BASE, ()))

    def test_read_int32_is_signed(self) -> None:
        self.process.write_int32(0x5000, -5)
        self.assertEqual(read_int32(self.process, 0x5000), -5)


class StringReadTests(unittest.TestCase):
    def setUp(self) -> None:
        self.process = FakeProcess()

    def test_truncates_at_first_nul(self) -> None:
        raw = "stage1_1".encode("utf-16-le") + b"\x00\x00" + "garbage".encode("utf-16-le")
        self.process.memory[0x4000] = raw.ljust(200, b"\x00")
        self.assertEqual(read_utf16_string(self.process, 0x4000), "stage1_1")

    def test_full_buffer_without_terminator(self) -> None:
        self.process.memory[0x4000] = ("a" * 100).encode("utf-16-le")
        self.assertEqual(read_utf16_string(self.process, 0x4000), "a" * 100)

    def test_undecodable_string_is_empty(self) -> None:
        # unpaired high surrogate
        raw = b"\x00\xd8" + "a".encode("utf-16-le")
        self.process.memory[0x4000] = raw.ljust(200, b"\x00")
        self.assertEqual(read_utf16_string(self.process, 0x4000), "")

    def test_short_buffer_fails(self) -> None:
        self.process.memory[0x4000] = b"a\x00"
        with self.assertRaises(MemoryReadError):
            read_utf16_string(self.process, 0x4000)

    def test_read_quantity_string(self) -> None:
        self.process.write_pointer(BASE + 0x10, 0x6000)
        self.process.write_string(0x6000 + 0x3E, "Music_Level04!BOSS")
        value = read_quantity(self.process, BASE, (0x10, 0x3E), is_string=True)
        self.assertEqual(value, "Music_Level04!BOSS")


class ParseTests(unittest.TestCase):
    def test_parse_offsets(self) -> None:
        self.assertEqual(parse_offsets("0x014BFE38, 0x10,0xA8 ,56"), (0x014BFE38, 0x10, 0xA8, 56))

    def test_parse_offsets_rejects_invalid_entry(self) -> None:
        self.assertEqual(parse_offsets("0x10,zz"), ())


if __name__ == "__main__":
    unittest.main()
