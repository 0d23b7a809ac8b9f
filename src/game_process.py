"""
Game process module.
Attaches to the game with pymem and exposes the raw reads used by memory_reader.
"""
import psutil
import pymem
import pymem.process

from memory_reader import MemoryReadError


class GameProcess:
    """Read-only handle to a running game process."""

    def __init__(self, pm, process_name, module_base, image_size):
        """
        Initialize game process handle.

        Args:
            pm: Pymem instance
            process_name: Name of the process/main module
            module_base: Main module base address
            image_size: Main module image size in bytes
        """
        self._pm = pm
        self.process_name = process_name
        self.process_id = pm.process_id
        self.module_base = module_base
        self.image_size = image_size

    @classmethod
    def attach(cls, process_name):
        """
        Attach to game process using pymem.

        Args:
            process_name: Name of the process/module

        Returns:
            GameProcess instance, or None if the process or its module is not available
        """
        try:
            pm = pymem.Pymem(process_name)
        except pymem.exception.ProcessError:
            return None

        try:
            module = pymem.process.module_from_name(pm.process_handle, process_name)
        except pymem.exception.PymemError:
            module = None

        if module is None:
            pm.close_process()
            return None

        return cls(pm, process_name, module.lpBaseOfDll, module.SizeOfImage)

    def is_open(self) -> bool:
        """Check if the attached process is still running."""
        try:
            proc = psutil.Process(self.process_id)
            # Windows process names are case-insensitive, as in pymem's lookup
            return proc.is_running() and proc.name().lower() == self.process_name.lower()
        except (psutil.NoSuchProcess, psutil.AccessDenied):
            return False

    def read_bytes(self, address: int, size: int) -> bytes:
        """Read raw bytes from the process."""
        try:
            return self._pm.read_bytes(address, size)
        except pymem.exception.PymemError as e:
            raise MemoryReadError(f"Failed to read {size} bytes at {hex(address)}") from e

    def read_ulonglong(self, address: int) -> int:
        """Read a 64-bit pointer from the process."""
        try:
            return self._pm.read_ulonglong(address)
        except pymem.exception.PymemError as e:
            raise MemoryReadError(f"Failed to read pointer at {hex(address)}") from e

    def close(self):
        """Close pymem process handle."""
        if self._pm is not None:
            try:
                self._pm.close_process()
            except pymem.exception.PymemError:
                pass
            self._pm = None
