"""
Autosplitter module.
Attaches to the game, polls its memory and drives the timer host.
"""
import threading
import time

from game_time import GameMode, GameTime, game_mode_from_level
from memory_reader import read_quantity
from splits import accum_frames_for_mode, should_reset, should_split, should_start
from versions import Quantity, detect_version
from watchers import MemoryValues


# Game process name
PROCESS_NAME = "SOR4.exe"

# Polls per second
ACTIVE_TICK_RATE = 60.0
IDLE_TICK_RATE = 2.0

PLACEHOLDER = "-"


class Session:
    """State of one attachment to the game process."""

    def __init__(self, process, profile):
        self.process = process
        self.profile = profile
        self.values = MemoryValues()
        self.game_mode = GameMode.NORMAL
        self.igt = GameTime()
        self.last_split = None
        self.failed_reads = set()


class AutoSplitter:
    """Polling state machine between the game process and the timer host."""

    def __init__(self, host, checkpoints, attach, process_name=PROCESS_NAME,
                 active_tick_rate=ACTIVE_TICK_RATE, idle_tick_rate=IDLE_TICK_RATE,
                 chain_overrides=None):
        """
        Initialize autosplitter.

        Args:
            host: TimerHost receiving start/split/reset and game time
            checkpoints: CheckpointConfig with the enabled splits
            attach: Callable(process_name) returning a process handle or None
            process_name: Name of the game process
            active_tick_rate: Polls per second while attached
            idle_tick_rate: Polls per second while searching for the process
            chain_overrides: {GameVersion: {Quantity: chain}} from the config
        """
        self.host = host
        self.checkpoints = checkpoints
        self.process_name = process_name
        self.active_tick_rate = active_tick_rate
        self.idle_tick_rate = idle_tick_rate
        self.chain_overrides = chain_overrides or {}
        self._attach = attach
        self._lock = threading.Lock()
        self.session = None

    @property
    def tick_rate(self) -> float:
        """Polls per second requested for the current lifecycle state."""
        if self.session is None:
            return self.idle_tick_rate
        return self.active_tick_rate

    def poll(self):
        """Run a single update. Never overlaps another poll."""
        with self._lock:
            self._update()

    def detach(self):
        """Drop the current session, if any."""
        with self._lock:
            self._close_session()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def _update(self):
        if self.session is None:
            self._try_attach()
            # first poll of a session only sets it up
            return

        if not self.session.process.is_open():
            self.host.log(f'[INFO] Process "{self.process_name}" exited')
            self._close_session()
            return

        # unknown build, nothing useful can be read
        if not self.session.profile.is_supported:
            return

        self._refresh_mem_values()
        self._run_timer_logic()

    def _try_attach(self):
        process = self._attach(self.process_name)
        if process is None:
            return

        profile = detect_version(process.image_size, self.chain_overrides)
        self.session = Session(process, profile)

        self.host.log(f'[OK] Attached to "{self.process_name}" (PID: {process.process_id})')
        self.host.log(f"[OK] Module base address: {hex(process.module_base)}")
        if profile.is_supported:
            self.host.log(f"[OK] Game version: {profile.version.value}")
        else:
            self.host.log(f"[ERROR] Unsupported game version (image size: {hex(process.image_size)})")

        self.host.pause_time_updates()
        self.host.set_display_variable("Version", profile.version.value)
        self.host.set_display_variable("Game Mode", PLACEHOLDER)
        self.host.set_display_variable("Last Split", PLACEHOLDER)
        for quantity in Quantity:
            self.host.set_display_variable(quantity.value, PLACEHOLDER)

    def _close_session(self):
        if self.session is None:
            return
        self.session.process.close()
        self.session = None
        self.host.set_display_variable("Version", PLACEHOLDER)

    # ------------------------------------------------------------------
    # Polling
    # ------------------------------------------------------------------

    def _refresh_mem_values(self):
        """Read every quantity, keeping the last good value of failed reads."""
        session = self.session
        process = session.process

        for quantity in Quantity:
            value = read_quantity(
                process,
                process.module_base,
                session.profile.chain(quantity),
                is_string=quantity.is_string,
            )
            if session.values.update(quantity, value):
                session.failed_reads.discard(quantity)
                self.host.set_display_variable(quantity.value, str(value))
            elif quantity not in session.failed_reads:
                # logged once until the value can be read again
                session.failed_reads.add(quantity)
                self.host.log(f"[ERROR] Could not refresh '{quantity.value}' value")

    def _run_timer_logic(self):
        session = self.session
        values = session.values

        if should_start(values):
            session.igt.reset()
            session.game_mode = game_mode_from_level(values.current_level.current)
            session.last_split = None
            # every new section re-enters the start window mid-run
            if not self.host.is_running():
                self.host.set_display_variable("Game Mode", session.game_mode.value)
                self.host.set_display_variable("Last Split", PLACEHOLDER)
                self.host.log(f"[INFO] Run started on '{values.current_level.current}' ({session.game_mode.value})")
            self.host.start()

        if self.host.is_running():
            accum_frames = accum_frames_for_mode(values, session.game_mode)
            session.igt.calculate_game_time(values.current_section_frames.current, accum_frames.current)
            self.host.set_game_time(session.igt.seconds)

        if should_reset(values):
            session.igt.reset()
            self.host.log("[INFO] Run reset")
            self.host.reset()
            return

        key = should_split(values, session.game_mode, self.checkpoints, session.last_split)
        if key is not None:
            session.last_split = key
            label = self.checkpoints.label(key)
            self.host.set_display_variable("Last Split", label)
            self.host.log(f"[INFO] Split: {label}")
            self.host.split()


class PollLoop:
    """Calls AutoSplitter.poll() from a background thread at its tick rate."""

    def __init__(self, autosplitter):
        self.autosplitter = autosplitter
        self._running = False
        self._thread = None

    def start(self):
        """Start polling in background thread."""
        if self._running:
            return

        self._running = True
        self._thread = threading.Thread(target=self._polling_loop, daemon=True)
        self._thread.start()

    def stop(self):
        """Stop polling and release the game process."""
        self._running = False
        if self._thread:
            self._thread.join(timeout=1.0)
        self.autosplitter.detach()

    def _polling_loop(self):
        """Main polling loop running in background thread."""
        while self._running:
            try:
                self.autosplitter.poll()
            except Exception as e:
                self.autosplitter.host.log(f"[ERROR] Error in polling loop: {e}")
                self.autosplitter.detach()
            time.sleep(1.0 / self.autosplitter.tick_rate)
