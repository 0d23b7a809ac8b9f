"""
PyQt5 overlay window module.
Creates a transparent, always-on-top timer showing the game time, splits and memory values.
"""
import threading

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel
from PyQt5.QtCore import Qt, QObject, pyqtSignal

from timer_host import TimerHost


# Display variables shown on the overlay, in order
SHOWN_VARIABLES = ["Last Split", "Version", "Game Mode", "Level Name", "Music Name"]


def format_game_time(seconds: float) -> str:
    """Format seconds as H:MM:SS.mmm (hours omitted when zero)."""
    millis = int(round(max(seconds, 0.0) * 1000))
    hours, millis = divmod(millis, 3600000)
    minutes, millis = divmod(millis, 60000)
    secs, millis = divmod(millis, 1000)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}.{millis:03d}"
    return f"{minutes:02d}:{secs:02d}.{millis:03d}"


class OverlayTimerHost(QObject, TimerHost):
    """
    Timer host backed by the overlay window.

    Timer state lives here so the polling thread can query it directly;
    display updates are forwarded to the window through signals.
    """

    # Signals for thread-safe updates
    game_time_changed = pyqtSignal(float)  # seconds
    running_changed = pyqtSignal(bool)
    split_added = pyqtSignal(int)  # split count
    variable_changed = pyqtSignal(str, str)  # name, value

    def __init__(self):
        super().__init__()
        self._lock = threading.Lock()
        self._running = False
        self._split_count = 0
        self._time_paused = False

    def start(self):
        with self._lock:
            if self._running:
                return
            self._running = True
            self._split_count = 0
        self.running_changed.emit(True)
        self.game_time_changed.emit(0.0)

    def split(self):
        with self._lock:
            if not self._running:
                return
            self._split_count += 1
            count = self._split_count
        self.split_added.emit(count)

    def reset(self):
        with self._lock:
            self._running = False
            self._split_count = 0
        self.running_changed.emit(False)
        self.game_time_changed.emit(0.0)

    def set_game_time(self, seconds: float):
        if self.is_running():
            self.game_time_changed.emit(seconds)

    def pause_time_updates(self):
        with self._lock:
            already_paused = self._time_paused
            self._time_paused = True
        if not already_paused:
            self.log("[INFO] Timer follows the in-game time")

    def is_running(self) -> bool:
        with self._lock:
            return self._running

    def set_display_variable(self, name: str, value: str):
        self.variable_changed.emit(name, value)


class OverlayWindow(QWidget):
    """Transparent overlay window for displaying the timer."""

    def __init__(self, config, parent=None):
        """
        Initialize overlay window.

        Args:
            config: Config instance for settings
            parent: Parent widget (None for top-level)
        """
        super().__init__(parent)
        self.config = config
        self._locked_state = config.get_overlay_locked()
        self._running = False
        self._variable_labels = {}

        self._init_ui()
        self._setup_window_properties()
        self._load_position()

    def _init_ui(self):
        """Initialize UI elements."""
        layout = QVBoxLayout()
        layout.setSpacing(5)
        layout.setContentsMargins(10, 10, 10, 10)

        # Status label
        self.status_label = QLabel("WAITING")
        self._update_status_display()
        layout.addWidget(self.status_label)

        # Game time label
        self.time_label = QLabel(format_game_time(0.0))
        self.time_label.setStyleSheet("font-size: 28px; font-weight: bold; color: #FFFFFF; background-color: transparent;")
        layout.addWidget(self.time_label)

        # Split count label
        self.split_label = QLabel("Splits: 0")
        self.split_label.setStyleSheet("font-size: 12px; color: #CCCCCC; background-color: transparent;")
        layout.addWidget(self.split_label)

        # Spacer
        spacer = QLabel("")
        spacer.setFixedHeight(5)
        spacer.setStyleSheet("background-color: transparent;")
        layout.addWidget(spacer)

        # Memory values
        for name in SHOWN_VARIABLES:
            label = QLabel(f"{name}: -")
            label.setStyleSheet("font-size: 10px; color: #AAAAAA; background-color: transparent;")
            label.setFixedHeight(15)
            layout.addWidget(label)
            self._variable_labels[name] = label

        self.setLayout(layout)

        # Set background color (semi-transparent dark)
        self.setStyleSheet("""
            QWidget {
                background-color: rgba(20, 20, 20, 200);
                border-radius: 5px;
            }
        """)

    def _setup_window_properties(self):
        """Configure window properties for overlay behavior."""
        self.setWindowFlags(
            Qt.WindowStaysOnTopHint |
            Qt.FramelessWindowHint
        )

        # Enable transparency
        self.setAttribute(Qt.WA_TranslucentBackground)

        # Make window accept mouse events for dragging
        self.setMouseTracking(True)

        self.setMinimumSize(220, 150)
        self.adjustSize()

    def _load_position(self):
        """Load overlay position from config."""
        x = self.config.get_overlay_pos_x()
        y = self.config.get_overlay_pos_y()
        self.move(x, y)

    def _update_status_display(self):
        """Update status label text and color based on current state."""
        if self._running:
            text = "RUNNING"
            color = "#00FF00"  # Green
        else:
            text = "READY"
            color = "#FFD700"  # Yellow

        self.status_label.setText(f"Status: {text}")
        self.status_label.setStyleSheet(
            f"font-size: 14px; font-weight: bold; color: {color}; background-color: transparent;"
        )

    def connect_host(self, host):
        """Connect OverlayTimerHost signals to the window."""
        host.game_time_changed.connect(self.set_game_time)
        host.running_changed.connect(self.set_running)
        host.split_added.connect(self.add_split)
        host.variable_changed.connect(self.set_display_variable)

    # Public methods for state updates
    def set_game_time(self, seconds: float):
        self.time_label.setText(format_game_time(seconds))

    def set_running(self, running: bool):
        self._running = running
        if not running:
            self.split_label.setText("Splits: 0")
        self._update_status_display()

    def add_split(self, count: int):
        """Show the number of splits done in this run."""
        self.split_label.setText(f"Splits: {count}")

    def set_display_variable(self, name: str, value: str):
        label = self._variable_labels.get(name)
        if label is not None:
            label.setText(f"{name}: {value}")

    def set_locked_state(self, locked: bool):
        """Set locked state (prevents moving)."""
        self._locked_state = locked
        self.config.set_overlay_locked(locked)

    def toggle_locked(self):
        """Toggle locked state."""
        self.set_locked_state(not self._locked_state)

    # Mouse event handlers for dragging
    def mousePressEvent(self, event):
        """Handle mouse press for dragging."""
        if event.button() == Qt.LeftButton and not self._locked_state:
            self._drag_position = event.globalPos() - self.frameGeometry().topLeft()
            event.accept()

    def mouseMoveEvent(self, event):
        """Handle mouse move for dragging."""
        if event.buttons() == Qt.LeftButton and not self._locked_state:
            if hasattr(self, '_drag_position'):
                new_pos = event.globalPos() - self._drag_position
                self.move(new_pos)
                # Save position to config
                self.config.set_overlay_pos(new_pos.x(), new_pos.y())
                event.accept()

    def mouseReleaseEvent(self, event):
        """Handle mouse release."""
        if hasattr(self, '_drag_position'):
            delattr(self, '_drag_position')

    def is_locked(self) -> bool:
        """Check if overlay is locked."""
        return self._locked_state
