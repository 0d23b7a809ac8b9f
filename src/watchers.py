"""
Change tracking for values sampled from game memory.
Every decision the autosplitter makes is taken from the edge between two samples.
"""
from versions import Quantity


class Pair:
    """Previous and current successful sample of one value."""

    def __init__(self, initial=0):
        self.previous = initial
        self.current = initial

    def update(self, value):
        """Shift current into previous and store the new sample."""
        self.previous = self.current
        self.current = value

    def changed(self) -> bool:
        return self.previous != self.current

    def increased(self) -> bool:
        return self.current > self.previous

    def __repr__(self):
        return f"Pair(previous={self.previous!r}, current={self.current!r})"


class MemoryValues:
    """Pairs for every tracked quantity of a session."""

    def __init__(self):
        self._pairs = {
            quantity: Pair("" if quantity.is_string else 0)
            for quantity in Quantity
        }

    def update(self, quantity, value) -> bool:
        """
        Record a new sample for a quantity.

        Args:
            quantity: Quantity that was read
            value: Value read, or None if the read failed

        Returns:
            True if the pair was updated, False for a failed read (pair left as is)
        """
        if value is None:
            return False
        self._pairs[quantity].update(value)
        return True

    def __getitem__(self, quantity) -> Pair:
        return self._pairs[quantity]

    @property
    def submenus_open(self) -> Pair:
        return self._pairs[Quantity.SUBMENUS_OPEN]

    @property
    def current_section_frames(self) -> Pair:
        return self._pairs[Quantity.CURRENT_SECTION_FRAMES]

    @property
    def accum_frames(self) -> Pair:
        return self._pairs[Quantity.ACCUM_FRAMES]

    @property
    def accum_frames_survival(self) -> Pair:
        return self._pairs[Quantity.ACCUM_FRAMES_SURVIVAL]

    @property
    def current_level(self) -> Pair:
        return self._pairs[Quantity.CURRENT_LEVEL]

    @property
    def current_music(self) -> Pair:
        return self._pairs[Quantity.CURRENT_MUSIC]
