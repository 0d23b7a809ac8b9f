"""
Start, reset and split decisions.
All conditions look at the edge between the previous and current samples.
"""
from checkpoints import BOSS_RUSH_NEW_BOSS, SURVIVAL, checkpoint_key
from game_time import GameMode


TRAINING_LEVEL = "training"
BOSS_RUSH_MARKER = "BossRush"
# First boss rush track, plays before any boss is defeated
BOSS_RUSH_INTRO_MUSIC = "Music_BossRush!A00_Diva"

# A run starts when the section frame counter enters (0, START_WINDOW_FRAMES)
START_WINDOW_FRAMES = 60
# Submenu counter edge of "Quit to main menu"
RESET_SUBMENUS_FROM = 2
RESET_SUBMENUS_TO = 0


def _in_start_window(frames) -> bool:
    return 0 < frames < START_WINDOW_FRAMES


def should_start(values) -> bool:
    """
    Check if a run just started.

    Args:
        values: MemoryValues of the session

    Returns:
        True when the section frame counter moved into the start window from
        outside of it on a playable level
    """
    frames = values.current_section_frames
    level = values.current_level.current

    if not (_in_start_window(frames.current) and not _in_start_window(frames.previous)):
        return False
    return bool(level) and level != TRAINING_LEVEL


def should_reset(values) -> bool:
    """Check if the player quit the run to the main menu."""
    submenus = values.submenus_open
    return submenus.previous == RESET_SUBMENUS_FROM and submenus.current == RESET_SUBMENUS_TO


def accum_frames_for_mode(values, game_mode):
    """Accumulated frames pair feeding the game time in the given mode."""
    if game_mode is GameMode.SURVIVAL:
        return values.accum_frames_survival
    return values.accum_frames


def should_split(values, game_mode, checkpoints, last_split):
    """
    Decide if a checkpoint was reached during the last poll.

    Conditions are checked in priority order and the first match wins:
    section advance, music cue, boss rush boss, survival level.

    Args:
        values: MemoryValues of the session
        game_mode: GameMode of the current run
        checkpoints: CheckpointConfig
        last_split: Key of the last split of the run, or None

    Returns:
        Key of the checkpoint to split on, or None
    """
    music = values.current_music

    # level/section change, the finished section is the previous level
    if accum_frames_for_mode(values, game_mode).increased():
        key = checkpoint_key(values.current_level.previous)
        if checkpoints.is_enabled(key) and key != last_split:
            return key

    if music.changed():
        key = checkpoint_key(music.current)
        if checkpoints.is_enabled(key) and key != last_split:
            return key

        if (BOSS_RUSH_MARKER in music.current
                and music.current != BOSS_RUSH_INTRO_MUSIC
                and checkpoints.is_enabled(BOSS_RUSH_NEW_BOSS)
                and key != last_split):
            return key

    if values.accum_frames_survival.increased() and checkpoints.is_enabled(SURVIVAL):
        return SURVIVAL

    return None
