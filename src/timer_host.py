"""
Timer host interface.
The autosplitter only talks to the timer through these calls.
"""


class TimerHost:
    """
    Receiver of the autosplitter's signals.

    All calls are fire-and-forget and must be safe to call from the polling
    thread. start/split/reset are ignored by the host when they do not apply
    to the current timer state.
    """

    def start(self):
        raise NotImplementedError

    def split(self):
        raise NotImplementedError

    def reset(self):
        raise NotImplementedError

    def set_game_time(self, seconds: float):
        """Publish the elapsed in-game time."""
        raise NotImplementedError

    def pause_time_updates(self):
        """Stop the host from advancing game time on its own clock."""
        raise NotImplementedError

    def is_running(self) -> bool:
        raise NotImplementedError

    def set_display_variable(self, name: str, value: str):
        """Show a diagnostic value, e.g. the detected version or a raw counter."""
        raise NotImplementedError

    def log(self, message: str):
        print(message)
