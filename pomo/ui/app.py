import sys
from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QIcon
from PySide6.QtWidgets import (
    QApplication,
    QMainWindow,
    QVBoxLayout,
    QWidget,
)
from pomo.common.logger import log
from pomo.common.setup import PATHS
from pomo.core import config
from pomo.core.timer import Phase, PomodoroTimer
from pomo.ui.sound import SoundNotifier
from pomo.ui.theme import THEMES, SIZES, build_stylesheet
from pomo.ui.ticker import Ticker
from pomo.ui.widgets import (
    break_text,
    build_controls,
    build_duration_row,
    build_session_panel,
    focus_text,
    play_pause_glyph,
    session_subtitle,
    session_title,
)

FONT_FAMILY = "Calibri"


# ---------------------------------------------------------------------------
# Main window
# ---------------------------------------------------------------------------

# Main window of the pomodoro timer. Owns no timer state of its own: every render reads from the PomodoroTimer.
class MainWindow(QMainWindow):

    def __init__(self, settings=None, timer=None):
        super().__init__()
        self.setWindowTitle("Pomodoro Timer")
        icon_path = PATHS.assets / "icon.ico"
        if icon_path.is_file():
            self.setWindowIcon(QIcon(str(icon_path)))

        # -- Settings --
        s = settings if settings is not None else config.load_settings()
        self.theme = s["theme"] if s["theme"] in THEMES else "Light"
        self.always_on_top = s.get("always_on_top", True)

        if self.always_on_top:
            self.setWindowFlags(self.windowFlags() | Qt.WindowStaysOnTopHint)

        # -- Core --
        if timer is None:
            notifier = SoundNotifier(s.get("sound_file", ""), enabled=s.get("sound_enabled", True), parent=self)
            timer = PomodoroTimer(s["focus_minutes"], s["break_minutes"], notifier=notifier)
        self.timer = timer
        self._ticker = Ticker(self._tick, parent=self)
        self._style_phase = None

        # -- Build UI --
        central = QWidget()
        self.setCentralWidget(central)
        self._main_lay = QVBoxLayout(central)
        self._build_ui()
        self._apply_style()
        self._render()
        QTimer.singleShot(0, self.adjustSize)

    # ------------------------------------------------------------------ #
    #  Layout and style                                                    #
    # ------------------------------------------------------------------ #

    def _build_ui(self):
        size = SIZES["Regular"]
        snap = self.timer.snapshot()

        focus_row, self._focus_w = build_duration_row(
            size, FONT_FAMILY, "focus", focus_text(snap), on_adjust=self._on_adjust_focus)
        break_row, self._break_w = build_duration_row(
            size, FONT_FAMILY, "break", break_text(snap), on_adjust=self._on_adjust_break)
        controls, self._controls_w = build_controls(
            size, FONT_FAMILY, on_play_pause=self._on_play_pause, on_stop=self._on_stop)
        self._session_panel, self._session_w = build_session_panel(size, FONT_FAMILY)

        for w in (focus_row, break_row, controls, self._session_panel):
            self._main_lay.addWidget(w)
        self._main_lay.addStretch()

    def _apply_style(self):
        phase_key = "progress_break" if self.timer.phase is Phase.ON_BREAK else "progress"
        if phase_key == self._style_phase:
            return
        self._style_phase = phase_key
        self.setStyleSheet(build_stylesheet(self.theme, phase_key))

        s = SIZES["Regular"]
        self._main_lay.setContentsMargins(s["frame_pad"], s["frame_pad"], s["frame_pad"], s["frame_pad"])
        self._main_lay.setSpacing(s["padding"])

    # ------------------------------------------------------------------ #
    #  Button handlers                                                     #
    # ------------------------------------------------------------------ #

    def _on_play_pause(self):
        self.timer.toggle_running()
        self._ticker.sync(self.timer.is_running)
        self._render()

    def _on_stop(self):
        self.timer.stop()
        self._ticker.sync(self.timer.is_running)
        self._render()
        QTimer.singleShot(0, self.adjustSize)

    def _on_adjust_focus(self, direction):
        self.timer.adjust_focus(direction)
        self._render()

    def _on_adjust_break(self, direction):
        self.timer.adjust_break(direction)
        self._render()

    # ------------------------------------------------------------------ #
    #  Tick                                                                #
    # ------------------------------------------------------------------ #

    def _tick(self):
        # A timeout already queued when the user paused must not count down
        if not self.timer.is_running:
            self._ticker.cancel()
            return
        self.timer.tick()
        self._render()

    # ------------------------------------------------------------------ #
    #  Rendering                                                           #
    # ------------------------------------------------------------------ #

    def _render(self):
        snap = self.timer.snapshot()

        self._focus_w["label"].setText(focus_text(snap))
        self._break_w["label"].setText(break_text(snap))

        play_btn = self._controls_w["play_pause"]
        play_btn.setText(play_pause_glyph(snap.is_running))
        play_btn.setToolTip("Pause timer" if snap.is_running else "Start timer")
        self._controls_w["stop"].setEnabled(not snap.is_idle)

        self._session_panel.setVisible(not snap.is_idle)
        if not snap.is_idle:
            self._session_w["title"].setText(session_title(snap))
            self._session_w["subtitle"].setText(session_subtitle(snap))
            self._session_w["progress"].setValue(round(snap.progress))
            self._session_w["progress"].setAccessibleDescription(f"{round(snap.progress)} percent")
        self._apply_style()

    # ------------------------------------------------------------------ #
    #  Window close                                                        #
    # ------------------------------------------------------------------ #

    def closeEvent(self, event):
        self._ticker.cancel()
        log.info("Window closed")
        event.accept()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main():
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec())
