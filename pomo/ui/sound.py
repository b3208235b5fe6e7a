from pathlib import Path
from PySide6.QtCore import QUrl
from PySide6.QtWidgets import QApplication
from pomo.common.logger import log
from pomo.common.setup import PATHS

DEFAULT_SOUND = PATHS.assets / "notify.wav"

# Plays the end-of-phase sound. Uses the configured .wav if there is one (falling back to assets/notify.wav), and
# the plain system beep otherwise. QSoundEffect.play() returns immediately, nothing here waits on playback.
class SoundNotifier:

    def __init__(self, sound_file="", enabled=True, parent=None):
        self.enabled = enabled
        self._effect = None

        path = Path(sound_file) if sound_file else DEFAULT_SOUND
        if enabled and path.is_file():
            from PySide6.QtMultimedia import QSoundEffect
            self._effect = QSoundEffect(parent)
            self._effect.setSource(QUrl.fromLocalFile(str(path.resolve())))
            self._effect.setVolume(0.8)
            log.debug(f"Notification sound loaded from '{path}'")
        elif enabled:
            if sound_file:
                log.warning(f"Configured sound_file '{sound_file}' does not exist, using system beep")
            log.debug("No notification sound file, using system beep")

    def play(self):
        if not self.enabled:
            return
        if self._effect is not None:
            self._effect.play()
        else:
            QApplication.beep()
