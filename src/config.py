"""
Configuration management module.
Handles loading, creating, and saving configuration file.
"""
import os
import configparser

from checkpoints import CHECKPOINTS, CheckpointConfig
from memory_reader import parse_offsets
from versions import GameVersion, Quantity


class Config:
    """Manages application configuration from INI file."""

    CONFIG_FILE = "config_user.ini"
    POINTERCHAINS_SECTION = "POINTERCHAINS."

    # Default values
    DEFAULT_PROCESS_NAME = "SOR4.exe"
    DEFAULT_ACTIVE_TICK_RATE = 60.0
    DEFAULT_IDLE_TICK_RATE = 2.0
    DEFAULT_HOTKEY_LOCK = "home"
    DEFAULT_HOTKEY_RESET = "page down"
    DEFAULT_HOTKEY_CLOSE = "end"
    DEFAULT_OVERLAY_POS_X = 200
    DEFAULT_OVERLAY_POS_Y = 200
    DEFAULT_OVERLAY_LOCKED = False

    def __init__(self, path=None):
        """
        Initialize config, create file if missing.

        Args:
            path: INI file path (defaults to CONFIG_FILE in the working directory)
        """
        self.path = path or self.CONFIG_FILE
        self.config = configparser.ConfigParser()
        # split keys are case sensitive (music cue names)
        self.config.optionxform = str
        self._ensure_config_file()
        self._load_config()

    def _ensure_config_file(self):
        """Create config file with defaults if it doesn't exist."""
        if not os.path.exists(self.path):
            self._create_default_config()

    def _create_default_config(self):
        """Create config file with default values."""
        self.config['GENERAL'] = {
            'process_name': self.DEFAULT_PROCESS_NAME,
            'active_tick_rate': str(self.DEFAULT_ACTIVE_TICK_RATE),
            'idle_tick_rate': str(self.DEFAULT_IDLE_TICK_RATE)
        }
        self.config['SPLITS'] = {
            key: str(default) for key, _, default in CHECKPOINTS
        }
        self.config['OVERLAY'] = {
            'pos_x': str(self.DEFAULT_OVERLAY_POS_X),
            'pos_y': str(self.DEFAULT_OVERLAY_POS_Y),
            'locked': str(self.DEFAULT_OVERLAY_LOCKED)
        }
        self.config['KEYBINDS'] = {
            'hotkey_lock': self.DEFAULT_HOTKEY_LOCK,
            'hotkey_reset': self.DEFAULT_HOTKEY_RESET,
            'hotkey_close': self.DEFAULT_HOTKEY_CLOSE
        }
        self._save_config()

    def _load_config(self):
        """Load configuration from file."""
        try:
            self.config.read(self.path)
        except configparser.Error as e:
            print(f"[ERROR] Error loading config file: {e}, using defaults")

    def _save_config(self):
        """Save current configuration to file."""
        try:
            with open(self.path, 'w') as f:
                self.config.write(f)
        except OSError as e:
            print(f"[ERROR] Error saving config file: {e}")

    def _get_float(self, section, option, default):
        try:
            value = float(self.config.get(section, option, fallback=default))
        except ValueError:
            return default
        return value if value > 0 else default

    def _get_bool(self, section, option, default):
        value = self.config.get(section, option, fallback=str(default))
        return value.strip().lower() in ('true', '1', 'yes', 'on')

    # Getter methods
    def get_process_name(self):
        """Get game process name."""
        return self.config.get('GENERAL', 'process_name',
                               fallback=self.DEFAULT_PROCESS_NAME)

    def get_active_tick_rate(self):
        """Get polls per second while attached."""
        return self._get_float('GENERAL', 'active_tick_rate', self.DEFAULT_ACTIVE_TICK_RATE)

    def get_idle_tick_rate(self):
        """Get polls per second while searching for the process."""
        return self._get_float('GENERAL', 'idle_tick_rate', self.DEFAULT_IDLE_TICK_RATE)

    def get_checkpoint_config(self):
        """
        Get the enabled checkpoints.

        Returns:
            CheckpointConfig built from the SPLITS section, defaults for missing keys
        """
        flags = {}
        for key, _, default in CHECKPOINTS:
            flags[key] = self._get_bool('SPLITS', key, default)
        return CheckpointConfig(flags)

    def get_pointer_chain_overrides(self):
        """
        Get pointer chains overridden per game version.

        Sections are named POINTERCHAINS.<VERSION> (e.g. POINTERCHAINS.LEGACY) with one
        option per quantity, e.g. current_section_frames = 0x014BFE38,0x10,0xA8,0x38

        Returns:
            {GameVersion: {Quantity: chain}}
        """
        overrides = {}
        for section in self.config.sections():
            if not section.startswith(self.POINTERCHAINS_SECTION):
                continue

            version_name = section[len(self.POINTERCHAINS_SECTION):].upper()
            try:
                version = GameVersion[version_name]
            except KeyError:
                print(f"[ERROR] Unknown game version in config section [{section}]")
                continue

            chains = {}
            for option, value in self.config.items(section):
                try:
                    quantity = Quantity[option.upper()]
                except KeyError:
                    print(f"[ERROR] Unknown pointer chain '{option}' in [{section}]")
                    continue
                chain = parse_offsets(value)
                if not chain:
                    print(f"[ERROR] Invalid pointer chain '{option}' in [{section}]")
                    continue
                chains[quantity] = chain
            overrides[version] = chains
        return overrides

    def get_hotkey_lock(self):
        """Get hotkey for lock/unlock overlay."""
        return self.config.get('KEYBINDS', 'hotkey_lock',
                               fallback=self.DEFAULT_HOTKEY_LOCK)

    def get_hotkey_reset(self):
        """Get hotkey for manual timer reset."""
        return self.config.get('KEYBINDS', 'hotkey_reset',
                               fallback=self.DEFAULT_HOTKEY_RESET)

    def get_hotkey_close(self):
        """Get hotkey for close application."""
        return self.config.get('KEYBINDS', 'hotkey_close',
                               fallback=self.DEFAULT_HOTKEY_CLOSE)

    def get_overlay_pos_x(self):
        """Get overlay X position."""
        try:
            return int(self.config.get('OVERLAY', 'pos_x',
                                       fallback=self.DEFAULT_OVERLAY_POS_X))
        except ValueError:
            return self.DEFAULT_OVERLAY_POS_X

    def get_overlay_pos_y(self):
        """Get overlay Y position."""
        try:
            return int(self.config.get('OVERLAY', 'pos_y',
                                       fallback=self.DEFAULT_OVERLAY_POS_Y))
        except ValueError:
            return self.DEFAULT_OVERLAY_POS_Y

    def get_overlay_locked(self):
        """Get overlay locked state."""
        return self._get_bool('OVERLAY', 'locked', self.DEFAULT_OVERLAY_LOCKED)

    # Setter methods
    def set_overlay_pos(self, x, y):
        """Save overlay position to config."""
        if 'OVERLAY' not in self.config:
            self.config['OVERLAY'] = {}
        self.config['OVERLAY']['pos_x'] = str(x)
        self.config['OVERLAY']['pos_y'] = str(y)
        self._save_config()

    def set_overlay_locked(self, locked):
        """Save overlay locked state to config."""
        if 'OVERLAY' not in self.config:
            self.config['OVERLAY'] = {}
        self.config['OVERLAY']['locked'] = str(locked)
        self._save_config()
