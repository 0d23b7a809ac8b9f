"""
Checkpoint (split) catalogue.
Every user-selectable split with its label and default state.
"""

SPLIT_KEY_PREFIX = "splits_"

# Dedicated flags that are not derived from a level or music name
BOSS_RUSH_NEW_BOSS = "splits_boss_rush_new_boss"
SURVIVAL = "splits_survival"


def checkpoint_key(name: str) -> str:
    """Checkpoint key for a level section or music cue name."""
    return SPLIT_KEY_PREFIX + name


# (key, label, enabled by default)
CHECKPOINTS = [
    (BOSS_RUSH_NEW_BOSS, "Boss Rush - Boss Defeated", True),
    (checkpoint_key("llenge_01_bossrun_v3"), "Boss Rush Completed", True),
    (SURVIVAL, "Survival Mode - Level Complete", False),
    (checkpoint_key("stage1_1"), "Streets", False),
    (checkpoint_key("stage1_2"), "Sewers", False),
    (checkpoint_key("stage1_3"), "Diva", True),
    (checkpoint_key("stage2_1"), "Jail", False),
    (checkpoint_key("stage2_2"), "HQ", False),
    (checkpoint_key("stage2_3"), "Commissioner", True),
    (checkpoint_key("stage3_1a"), "Outside", False),
    (checkpoint_key("stage3_1b"), "Inside", False),
    (checkpoint_key("stage3_1c"), "Hallway", False),
    (checkpoint_key("stage3_2"), "Nora", True),
    (checkpoint_key("stage4_1"), "Pier", False),
    (checkpoint_key("Music_Level04!BOSS"), "Estel Start", False),
    (checkpoint_key("stage4_2"), "Estel", True),
    (checkpoint_key("stage5_1"), "Underground", False),
    (checkpoint_key("stage5_2"), "Bar", False),
    (checkpoint_key("stage5_3"), "Barbon", True),
    (checkpoint_key("stage6_1"), "Streets", False),
    (checkpoint_key("stage6_2a"), "Dojo - Galsia Room", False),
    (checkpoint_key("stage6_2b"), "Dojo - Donovan Room", False),
    (checkpoint_key("stage6_2c"), "Dojo - Pheasant Room", False),
    (checkpoint_key("stage6_3"), "Shiva", True),
    (checkpoint_key("Music_Level07!BOSS"), "Estel Start", False),
    (checkpoint_key("stage7_1"), "Estel", True),
    (checkpoint_key("stage8_1"), "Gallery", False),
    (checkpoint_key("stage8_2"), "Beyo and Riha", True),
    (checkpoint_key("stage9_1"), "Sauna", False),
    (checkpoint_key("stage9_2"), "Elevator", False),
    (checkpoint_key("stage9_3"), "Max", True),
    (checkpoint_key("stage10_1a"), "Rooftops - Arrival", False),
    (checkpoint_key("stage10_1b"), "Rooftops - Advance", False),
    (checkpoint_key("stage10_1c"), "Rooftops - Wrecking Balls", False),
    (checkpoint_key("stage10_3"), "DJ K-Washi", True),
    (checkpoint_key("stage11_1"), "Platform", False),
    (checkpoint_key("stage11_2a"), "Boarding the Airplane", False),
    (checkpoint_key("stage11_2b"), "Inside the Airplane", False),
    (checkpoint_key("stage11_3"), "Mr. Y", True),
    (checkpoint_key("stage12_1"), "Wreckage", False),
    (checkpoint_key("stage12_2a"), "Hallway", False),
    (checkpoint_key("stage12_2b"), "Inside Castle", False),
    (checkpoint_key("stage12_2c"), "Ms. Y", False),
    (checkpoint_key("stage12_3"), "Ms. Y, Mr. Y and Y Mecha", True),
]

DEFAULT_FLAGS = {key: default for key, _, default in CHECKPOINTS}
LABELS = {key: label for key, label, _ in CHECKPOINTS}


class CheckpointConfig:
    """Read-only set of enabled checkpoints."""

    def __init__(self, flags=None):
        """
        Initialize checkpoint config.

        Args:
            flags: {key: enabled} overriding the defaults, unknown keys are ignored
        """
        self._flags = dict(DEFAULT_FLAGS)
        if flags:
            for key, enabled in flags.items():
                if key in self._flags:
                    self._flags[key] = bool(enabled)

    def is_enabled(self, key) -> bool:
        """Check if a checkpoint key is known and enabled."""
        return self._flags.get(key, False)

    def label(self, key) -> str:
        """Human-readable label, the level or music name for unknown keys."""
        if key in LABELS:
            return LABELS[key]
        if key.startswith(SPLIT_KEY_PREFIX):
            return key[len(SPLIT_KEY_PREFIX):]
        return key

    def enabled_keys(self) -> list:
        return [key for key, enabled in self._flags.items() if enabled]
