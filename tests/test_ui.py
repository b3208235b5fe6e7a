"""Tests for the Qt side: tick source, sound notifier and main window.

Covers: pomo.ui.ticker, pomo.ui.sound, pomo.ui.widgets, pomo.ui.app
"""

import os
import tempfile
import unittest

os.environ.setdefault("POMODORO_TIMER_HOME", tempfile.mkdtemp(prefix="pomo-test-"))
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication


def _app():
    return QApplication.instance() or QApplication([])


_SETTINGS = {
    "focus_minutes": 25,
    "break_minutes": 5,
    "theme": "Light",
    "always_on_top": False,
    "sound_enabled": False,
    "sound_file": "",
}


# ──────────────────────────────────────────────────────────────────────────
# ticker.py tests
# ──────────────────────────────────────────────────────────────────────────

class TestTicker(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.app = _app()

    def test_sync_starts_and_stops(self):
        from pomo.ui.ticker import Ticker
        ticker = Ticker(lambda: None)
        self.assertFalse(ticker.active)
        ticker.sync(True)
        self.assertTrue(ticker.active)
        ticker.sync(True)
        self.assertTrue(ticker.active)
        ticker.sync(False)
        self.assertFalse(ticker.active)

    def test_cancel_stops(self):
        from pomo.ui.ticker import Ticker
        ticker = Ticker(lambda: None)
        ticker.sync(True)
        ticker.cancel()
        self.assertFalse(ticker.active)


# ──────────────────────────────────────────────────────────────────────────
# sound.py tests
# ──────────────────────────────────────────────────────────────────────────

class TestSoundNotifier(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.app = _app()

    def test_disabled_never_loads_or_plays(self):
        from pomo.ui.sound import SoundNotifier
        n = SoundNotifier(enabled=False)
        self.assertIsNone(n._effect)
        n.play()

    def test_missing_file_falls_back_to_beep(self):
        from pomo.ui.sound import SoundNotifier
        with self.assertLogs("pomodoro_timer", level="WARNING"):
            n = SoundNotifier(sound_file=os.path.join(tempfile.gettempdir(), "does-not-exist.wav"))
        self.assertIsNone(n._effect)
        n.play()


# ──────────────────────────────────────────────────────────────────────────
# widgets.py text helpers
# ──────────────────────────────────────────────────────────────────────────

class TestWidgetText(unittest.TestCase):

    def test_idle_texts(self):
        from pomo.core.timer import PomodoroTimer
        from pomo.ui import widgets
        snap = PomodoroTimer().snapshot()
        self.assertEqual(widgets.focus_text(snap), "Focus Duration: 25:00")
        self.assertEqual(widgets.break_text(snap), "Break Duration: 05:00")
        self.assertEqual(widgets.session_title(snap), "")
        self.assertEqual(widgets.session_subtitle(snap), "")
        self.assertEqual(widgets.play_pause_glyph(False), widgets.PLAY_GLYPH)

    def test_break_title_uses_break_minutes(self):
        from pomo.core.timer import PomodoroTimer
        from pomo.ui import widgets
        t = PomodoroTimer(focus_minutes=5, break_minutes=3)
        t.toggle_running()
        for _ in range(300):
            t.tick()
        snap = t.snapshot()
        self.assertEqual(widgets.session_title(snap), "On Break for 03:00 minutes")
        self.assertEqual(widgets.session_subtitle(snap), "03:00 remaining")
        self.assertEqual(widgets.play_pause_glyph(True), widgets.PAUSE_GLYPH)


# ──────────────────────────────────────────────────────────────────────────
# app.py tests
# ──────────────────────────────────────────────────────────────────────────

class TestMainWindow(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.app = _app()

    def setUp(self):
        from pomo.ui.app import MainWindow
        self.window = MainWindow(settings=dict(_SETTINGS))

    def tearDown(self):
        self.window.close()
        self.window.deleteLater()

    def test_initial_render_is_idle(self):
        w = self.window
        self.assertTrue(w._session_panel.isHidden())
        self.assertFalse(w._controls_w["stop"].isEnabled())
        self.assertEqual(w._focus_w["label"].text(), "Focus Duration: 25:00")
        self.assertEqual(w._break_w["label"].text(), "Break Duration: 05:00")
        self.assertFalse(w._ticker.active)

    def test_play_starts_session_and_ticker(self):
        w = self.window
        w._on_play_pause()
        self.assertTrue(w._ticker.active)
        self.assertFalse(w._session_panel.isHidden())
        self.assertTrue(w._controls_w["stop"].isEnabled())
        self.assertEqual(w._session_w["title"].text(), "Focusing for 25:00 minutes")
        self.assertEqual(w._session_w["subtitle"].text(), "25:00 remaining")

    def test_tick_updates_remaining_and_progress(self):
        w = self.window
        w._on_play_pause()
        w._tick()
        self.assertEqual(w._session_w["subtitle"].text(), "24:59 remaining")
        self.assertEqual(w._session_w["progress"].value(), 100)

    def test_pause_cancels_ticker_and_freezes_time(self):
        w = self.window
        w._on_play_pause()
        w._tick()
        w._on_play_pause()
        self.assertFalse(w._ticker.active)
        w._tick()
        self.assertEqual(w.timer.time_remaining, 1499)
        self.assertEqual(w._session_w["subtitle"].text(), "24:59 remaining")

    def test_stop_hides_session_and_cancels_ticker(self):
        w = self.window
        w._on_play_pause()
        w._tick()
        w._controls_w["stop"].click()
        self.assertTrue(w.timer.is_idle)
        self.assertFalse(w._ticker.active)
        self.assertTrue(w._session_panel.isHidden())
        self.assertFalse(w._controls_w["stop"].isEnabled())

    def test_duration_buttons_adjust_labels(self):
        w = self.window
        w._focus_w["plus"].click()
        w._break_w["minus"].click()
        self.assertEqual(w.timer.focus_minutes, 30)
        self.assertEqual(w.timer.break_minutes, 4)
        self.assertEqual(w._focus_w["label"].text(), "Focus Duration: 30:00")
        self.assertEqual(w._break_w["label"].text(), "Break Duration: 04:00")

    def test_close_cancels_ticker(self):
        from PySide6.QtGui import QCloseEvent
        w = self.window
        w._on_play_pause()
        w.closeEvent(QCloseEvent())
        self.assertFalse(w._ticker.active)


if __name__ == "__main__":
    unittest.main()
