"""Fake game process and timer host shared by the tests."""
import struct

from memory_reader import STRING_CAPACITY, MemoryReadError
from timer_host import TimerHost
from versions import LATEST_CHAINS, Quantity


LATEST_IMAGE_SIZE = 0x1657000
LEGACY_IMAGE_SIZE = 0x1638000
MODULE_BASE = 0x140000000


class FakeProcess:
    """Sparse memory image; only exact addresses that were written can be read."""

    def __init__(self, image_size=LATEST_IMAGE_SIZE, module_base=MODULE_BASE, process_id=4242):
        self.image_size = image_size
        self.module_base = module_base
        self.process_id = process_id
        self.memory = {}
        self.open = True
        self.closed = False

    def write_pointer(self, address, value):
        self.memory[address] = struct.pack("<Q", value)

    def write_int32(self, address, value):
        self.memory[address] = struct.pack("<i", value)

    def write_string(self, address, text):
        raw = text.encode("utf-16-le") + b"\x00\x00"
        self.memory[address] = raw.ljust(STRING_CAPACITY * 2, b"\x00")[:STRING_CAPACITY * 2]

    def read_bytes(self, address, size):
        data = self.memory.get(address)
        if data is None or len(data) < size:
            raise MemoryReadError(f"Unmapped address {hex(address)}")
        return data[:size]

    def read_ulonglong(self, address):
        return struct.unpack("<Q", self.read_bytes(address, 8))[0]

    def is_open(self):
        return self.open

    def close(self):
        self.closed = True


class FakeGame(FakeProcess):
    """FakeProcess with every pointer chain of a version laid out in memory."""

    def __init__(self, image_size=LATEST_IMAGE_SIZE, chains=LATEST_CHAINS):
        super().__init__(image_size=image_size)
        self._next_region = 0x10000000
        self._nodes = {}
        self.addresses = {
            quantity: self._install_chain(chain)
            for quantity, chain in chains.items()
        }

    def _install_chain(self, chain):
        address = self.module_base + chain[0]
        for offset in chain[1:]:
            if address not in self._nodes:
                self._nodes[address] = self._next_region
                self.write_pointer(address, self._next_region)
                self._next_region += 0x10000
            address = self._nodes[address] + offset
        return address

    def set(self, quantity, value):
        if quantity.is_string:
            self.write_string(self.addresses[quantity], value)
        else:
            self.write_int32(self.addresses[quantity], value)

    def set_all(self, **values):
        for name, value in values.items():
            self.set(Quantity[name.upper()], value)

    def unmap(self, quantity):
        self.memory.pop(self.addresses[quantity], None)


class RecordingHost(TimerHost):
    """Timer host recording every call, with LiveSplit-like start/reset rules."""

    def __init__(self):
        self.events = []
        self.game_times = []
        self.variables = {}
        self.logs = []
        self.running = False

    def start(self):
        self.events.append("start")
        self.running = True

    def split(self):
        self.events.append("split")

    def reset(self):
        self.events.append("reset")
        self.running = False

    def set_game_time(self, seconds):
        self.game_times.append(seconds)

    def pause_time_updates(self):
        self.events.append("pause_time_updates")

    def is_running(self):
        return self.running

    def set_display_variable(self, name, value):
        self.variables[name] = value

    def log(self, message):
        self.logs.append(message)
