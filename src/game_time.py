"""
In-game time module.
Turns the game's frame counters into elapsed seconds, ignoring loading-screen garbage.
"""
from enum import Enum


FRAME_RATE = 60.0
# Largest forward step accepted in a single poll, in seconds
MAX_TIME_JUMP = 10.0


class GameMode(Enum):
    NORMAL = "Normal"
    SURVIVAL = "Survival"


def game_mode_from_level(level_name: str) -> GameMode:
    """
    Derive the game mode from the current level name.

    Story stages and boss rush levels are Normal, anything else is Survival.
    """
    if not level_name or "stage" in level_name or "boss" in level_name:
        return GameMode.NORMAL
    return GameMode.SURVIVAL


class GameTime:
    """Elapsed in-game time of the current run."""

    def __init__(self):
        self.seconds = 0.0

    def reset(self):
        self.seconds = 0.0

    def calculate_game_time(self, current_section_frames: int, accum_frames: int) -> bool:
        """
        Update the elapsed time from the frame counters.

        The game reads garbage for a moment on loading screens, so a new value is
        only taken if it is a reset to 0, the first value after a reset, or a
        forward step of less than MAX_TIME_JUMP seconds.

        Args:
            current_section_frames: Frames spent in the current section
            accum_frames: Frames of the completed sections for the active mode

        Returns:
            True if the new time was accepted
        """
        new_seconds = (current_section_frames + accum_frames) / FRAME_RATE

        if new_seconds < 0:
            return False

        if (new_seconds == 0.0
                or self.seconds == 0.0
                or self.seconds < new_seconds < self.seconds + MAX_TIME_JUMP):
            self.seconds = new_seconds
            return True

        return False
