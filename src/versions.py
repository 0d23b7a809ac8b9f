"""
Game version detection module.
Maps the main module image size to a version and its pointer-chain table.
"""
from enum import Enum


class Quantity(Enum):
    """Values tracked in game memory. The value is the display variable name."""

    SUBMENUS_OPEN = "Submenus"
    CURRENT_SECTION_FRAMES = "Current section frames"
    ACCUM_FRAMES = "Accumulated Frames"
    ACCUM_FRAMES_SURVIVAL = "Accumulated Frames Survival"
    CURRENT_LEVEL = "Level Name"
    CURRENT_MUSIC = "Music Name"

    @property
    def is_string(self) -> bool:
        return self in (Quantity.CURRENT_LEVEL, Quantity.CURRENT_MUSIC)


class GameVersion(Enum):
    UNSUPPORTED = "Unsupported"
    LEGACY = "Legacy"
    LATEST = "Latest"


# Pointer chains, first offset relative to SOR4.exe
LATEST_CHAINS = {
    Quantity.SUBMENUS_OPEN: (0x014BFAB0, 0x0, 0x78, 0x28),
    Quantity.CURRENT_SECTION_FRAMES: (0x014BFE38, 0x10, 0xA8, 0x38),
    Quantity.ACCUM_FRAMES: (0x014BFE38, 0x0, 0x78, 0x10, 0x2C),
    Quantity.ACCUM_FRAMES_SURVIVAL: (0x014BFE38, 0x0, 0x78, 0x10, 0x14),
    Quantity.CURRENT_LEVEL: (0x014BFE38, 0x0, 0x50, 0x18, 0x108, 0x3E),
    Quantity.CURRENT_MUSIC: (0x014BFE30, 0x0, 0x70, 0x28, 0xC),
}

# TODO: no separate chains are known for the legacy build yet, it shares the
# latest table. Users can correct it through [POINTERCHAINS.LEGACY].
LEGACY_CHAINS = dict(LATEST_CHAINS)

VERSION_CHAINS = {
    GameVersion.LATEST: LATEST_CHAINS,
    GameVersion.LEGACY: LEGACY_CHAINS,
}

# Main module image size -> version
IMAGE_SIZES = {
    0x1657000: GameVersion.LATEST,
    0x1638000: GameVersion.LEGACY,
}


class VersionProfile:
    """A detected game version and the pointer chain of each tracked quantity."""

    def __init__(self, version, chains):
        self.version = version
        self._chains = {quantity: tuple(chains.get(quantity, ())) for quantity in Quantity}

    def chain(self, quantity) -> tuple:
        """Pointer chain for a quantity, empty if the version is unsupported."""
        return self._chains[quantity]

    @property
    def is_supported(self) -> bool:
        return self.version is not GameVersion.UNSUPPORTED

    def __repr__(self):
        return f"VersionProfile({self.version.value})"


def detect_version(image_size, overrides=None) -> VersionProfile:
    """
    Select the version profile for a main module image size.

    Args:
        image_size: SizeOfImage of the main module
        overrides: Optional {GameVersion: {Quantity: chain}} replacing table entries

    Returns:
        VersionProfile, with empty chains for unknown sizes
    """
    version = IMAGE_SIZES.get(image_size, GameVersion.UNSUPPORTED)
    if version is GameVersion.UNSUPPORTED:
        return VersionProfile(version, {})

    chains = dict(VERSION_CHAINS[version])
    if overrides and overrides.get(version):
        chains.update({
            quantity: chain
            for quantity, chain in overrides[version].items()
            if chain
        })
    return VersionProfile(version, chains)
