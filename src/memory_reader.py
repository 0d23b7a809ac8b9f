"""
Memory reading module.
Resolves multi-level pointer chains in the game process and reads typed values.

The functions here work on any process object exposing ``read_bytes(address, size)``
and ``read_ulonglong(address)`` that raise MemoryReadError on failure
(see game_process.GameProcess).
"""
import struct


# Size of the fixed string buffer, in UTF-16 code units
STRING_CAPACITY = 100


class MemoryReadError(Exception):
    """Raised when an address in the game process cannot be read."""


# ============================================================================
# Pointer Chains
# ============================================================================

def resolve_pointer_chain(process, base_address, offsets):
    """
    Resolves a multi-level pointer chain and returns the final address.

    The first offset is added to the base address, every following offset is
    added to the pointer read at the previous address.

    Args:
        process: Process object with read_ulonglong()
        base_address: Module base address (int)
        offsets: Sequence of offsets (ints)

    Returns:
        Final address after following the pointer chain

    Raises:
        MemoryReadError: The chain is empty, a pointer could not be read or is null
    """
    if not offsets:
        raise MemoryReadError("Empty pointer chain")

    addr = base_address + offsets[0]

    for level, offset in enumerate(offsets[1:], start=1):
        # 8 bytes, 64-bit process
        addr = process.read_ulonglong(addr)
        if addr == 0:
            raise MemoryReadError(f"Null pointer at level {level}")
        addr += offset

    return addr


def parse_offsets(offsets_str: str) -> tuple:
    """
    Parse comma-separated offsets string to a pointer chain.

    Args:
        offsets_str: Comma-separated offsets (e.g., "0x014BFE38,0x10,0xA8,0x38")

    Returns:
        Tuple of integer offsets, empty if any entry is invalid
    """
    offsets = []
    try:
        for offset_str in offsets_str.split(','):
            offset_str = offset_str.strip()
            if offset_str.startswith("0x") or offset_str.startswith("0X"):
                offsets.append(int(offset_str, 16))
            else:
                offsets.append(int(offset_str))
    except (ValueError, AttributeError):
        return ()
    return tuple(offsets)


# ============================================================================
# Typed Reads
# ============================================================================

def read_int32(process, address: int) -> int:
    """Read a signed 32-bit integer from memory address."""
    raw = process.read_bytes(address, 4)
    return struct.unpack("<i", raw)[0]


def read_utf16_string(process, address: int, capacity: int = STRING_CAPACITY) -> str:
    """
    Read a NUL-terminated UTF-16 string from a fixed-size buffer.

    Args:
        process: Process object with read_bytes()
        address: Address of the first code unit
        capacity: Buffer size in code units

    Returns:
        Decoded string, "" if the buffer does not hold valid UTF-16
    """
    raw = process.read_bytes(address, capacity * 2)

    for i in range(0, len(raw) - 1, 2):
        if raw[i] == 0 and raw[i + 1] == 0:
            raw = raw[:i]
            break

    try:
        return raw.decode("utf-16-le")
    except UnicodeDecodeError:
        return ""


def read_quantity(process, base_address, offsets, is_string=False):
    """
    Follow a pointer chain and read the value at its end.

    Args:
        process: Process object
        base_address: Module base address
        offsets: Pointer chain
        is_string: Read a UTF-16 string instead of an int32

    Returns:
        The value read, or None if any step failed
    """
    try:
        address = resolve_pointer_chain(process, base_address, offsets)
        if is_string:
            return read_utf16_string(process, address)
        return read_int32(process, address)
    except MemoryReadError:
        return None
