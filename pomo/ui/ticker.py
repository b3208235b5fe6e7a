"""One-second tick source bound to the timer's running flag."""

from PySide6.QtCore import QObject, QTimer
from pomo.common.logger import log

TICK_INTERVAL_MS = 1000


class Ticker(QObject):
    """Repeating QTimer that only ever runs while the pomodoro is running.

    Call sync() after every action that may flip the running flag, and cancel()
    on teardown. Nothing else starts or stops the underlying QTimer.
    """

    def __init__(self, on_tick, interval_ms=TICK_INTERVAL_MS, parent=None):
        super().__init__(parent)
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(on_tick)

    @property
    def active(self):
        return self._timer.isActive()

    def sync(self, running):
        if running and not self._timer.isActive():
            self._timer.start()
            log.debug("Tick source started")
        elif not running and self._timer.isActive():
            self._timer.stop()
            log.debug("Tick source stopped")

    def cancel(self):
        self.sync(False)
