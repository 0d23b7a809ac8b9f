"""
Main application entry point.
Initializes the overlay timer, the autosplitter polling loop and hotkey handling.
"""
import sys
import ctypes
from PyQt5.QtWidgets import QApplication
import keyboard

from autosplitter import AutoSplitter, PollLoop
from config import Config
from game_process import GameProcess
from overlay import OverlayTimerHost, OverlayWindow


class HotkeyManager:
    """Manages global hotkeys for the application."""

    def __init__(self, overlay, host, app, config):
        """
        Initialize hotkey manager.

        Args:
            overlay: OverlayWindow instance
            host: OverlayTimerHost instance
            app: QApplication instance
            config: Config instance for hotkey settings
        """
        self.overlay = overlay
        self.host = host
        self.app = app
        self.config = config
        self._registered = False

    def register_hotkeys(self):
        """Register all global hotkeys from config."""
        try:
            keyboard.add_hotkey(self.config.get_hotkey_lock(), self._toggle_lock)
            keyboard.add_hotkey(self.config.get_hotkey_reset(), self._reset_timer)
            keyboard.add_hotkey(self.config.get_hotkey_close(), self._close_app)
            self._registered = True
        except (ImportError, ValueError, OSError) as e:
            print(f"[ERROR] Error registering hotkeys: {e}")

    def unregister_hotkeys(self):
        if self._registered:
            keyboard.unhook_all_hotkeys()
            self._registered = False

    def get_hotkey_info(self):
        """Get formatted hotkey information for display."""
        return [
            f"  {self.config.get_hotkey_lock().upper()} - Toggle overlay lock/unlock",
            f"  {self.config.get_hotkey_reset().upper()} - Reset timer",
            f"  {self.config.get_hotkey_close().upper()} - Close application"
        ]

    def _toggle_lock(self):
        """Toggle overlay lock state."""
        self.overlay.toggle_locked()
        status = "locked" if self.overlay.is_locked() else "unlocked"
        print(f"Overlay {status}")

    def _reset_timer(self):
        """Reset the timer by hand (e.g. after a crash)."""
        print("Timer reset")
        self.host.reset()

    def _close_app(self):
        """Close application."""
        print("Closing application...")
        self.app.quit()


def main():
    """Main application entry point."""
    # Set Windows AppUserModelID for proper taskbar icon (Windows only)
    if sys.platform == 'win32':
        try:
            ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID('com.sor4.autosplitter.1.0.0')
        except (AttributeError, OSError):
            pass

    app = QApplication(sys.argv)
    app.setQuitOnLastWindowClosed(False)

    print("Loading configuration...")
    config = Config()
    checkpoints = config.get_checkpoint_config()

    print("Creating overlay window...")
    overlay = OverlayWindow(config)
    overlay.setWindowTitle("SOR4 Autosplitter")
    host = OverlayTimerHost()
    overlay.connect_host(host)
    overlay.show()

    autosplitter = AutoSplitter(
        host,
        checkpoints,
        attach=GameProcess.attach,
        process_name=config.get_process_name(),
        active_tick_rate=config.get_active_tick_rate(),
        idle_tick_rate=config.get_idle_tick_rate(),
        chain_overrides=config.get_pointer_chain_overrides(),
    )
    poll_loop = PollLoop(autosplitter)

    hotkey_manager = HotkeyManager(overlay, host, app, config)
    hotkey_manager.register_hotkeys()

    print(f"Enabled splits: {len(checkpoints.enabled_keys())}")
    print("-----------")
    print("Hotkeys:")
    for line in hotkey_manager.get_hotkey_info():
        print(line)
    print("-----------")
    print(f'Searching process "{autosplitter.process_name}"...')

    poll_loop.start()

    try:
        sys.exit(app.exec_())
    except KeyboardInterrupt:
        print("Application interrupted")
    finally:
        poll_loop.stop()
        hotkey_manager.unregister_hotkeys()
        print("Application closed")


if __name__ == "__main__":
    main()
