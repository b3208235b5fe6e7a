"""Widget builders: duration rows, control buttons, session panel and progress bar.

Each builder returns a (container, widget_dict) tuple.  The container is a
QWidget that can be dropped straight into a layout; the widget_dict maps
logical names to sub-widgets for later updates.  The text helpers at the
bottom turn a TimerSnapshot into the strings those widgets show.
"""

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)
from pomo.core.timer import Direction
from pomo.util import minutes_to_duration, seconds_to_duration

PLAY_GLYPH = "▶"
PAUSE_GLYPH = "❚❚"
STOP_GLYPH = "■"
MINUS_GLYPH = "−"
PLUS_GLYPH = "+"


def _transparent(name, layout_cls=QHBoxLayout):
    container = QWidget()
    container.setObjectName(name)
    container.setStyleSheet(f"#{name} {{ background: transparent; }}")
    lay = layout_cls(container)
    lay.setContentsMargins(0, 0, 0, 0)
    return container, lay


def build_duration_row(size, font_family, name, text, on_adjust):
    """Label plus -/+ buttons for one duration.

    on_adjust is called with a Direction.  Returns (container, widget_dict).
    """
    rc, lay = _transparent(f"{name}Row")
    lay.setSpacing(size["padding"])

    label = QLabel(text)
    label.setObjectName(f"duration_{name}")
    label.setFont(QFont(font_family, size["label"]))
    label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
    lay.addWidget(label, 1)

    minus_btn = QPushButton(MINUS_GLYPH)
    minus_btn.setObjectName(f"decrease_{name}")
    minus_btn.setFont(QFont(font_family, size["action"]))
    minus_btn.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
    minus_btn.setToolTip(f"Decrease {name} duration")
    minus_btn.clicked.connect(lambda _=False: on_adjust(Direction.DECREASE))
    lay.addWidget(minus_btn)

    plus_btn = QPushButton(PLUS_GLYPH)
    plus_btn.setObjectName(f"increase_{name}")
    plus_btn.setFont(QFont(font_family, size["action"]))
    plus_btn.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
    plus_btn.setToolTip(f"Increase {name} duration")
    plus_btn.clicked.connect(lambda _=False: on_adjust(Direction.INCREASE))
    lay.addWidget(plus_btn)

    return rc, {"label": label, "minus": minus_btn, "plus": plus_btn}


def build_controls(size, font_family, on_play_pause, on_stop):
    """Play/pause and stop buttons.  Returns (container, widget_dict)."""
    rc, lay = _transparent("controls")
    lay.setSpacing(max(1, size["padding"] // 2))

    play_btn = QPushButton(PLAY_GLYPH)
    play_btn.setObjectName("playPause")
    play_btn.setFont(QFont(font_family, size["title"]))
    play_btn.setToolTip("Start or pause timer")
    play_btn.clicked.connect(on_play_pause)
    lay.addWidget(play_btn)

    stop_btn = QPushButton(STOP_GLYPH)
    stop_btn.setObjectName("stop")
    stop_btn.setFont(QFont(font_family, size["title"]))
    stop_btn.setToolTip("Stop the session")
    stop_btn.setEnabled(False)
    stop_btn.clicked.connect(on_stop)
    lay.addWidget(stop_btn)
    lay.addStretch()

    return rc, {"play_pause": play_btn, "stop": stop_btn}


def build_session_panel(size, font_family):
    """Session title, remaining-time subtitle and the progress bar.

    Hidden by the window whenever there is no session.  Returns (container, widget_dict).
    """
    rc, lay = _transparent("sessionPanel", QVBoxLayout)
    lay.setSpacing(size["padding"] // 2)

    title = QLabel("")
    title.setObjectName("title")
    title_font = QFont(font_family, size["title"])
    title_font.setBold(True)
    title.setFont(title_font)
    lay.addWidget(title)

    subtitle = QLabel("")
    subtitle.setObjectName("subtitle")
    subtitle.setFont(QFont(font_family, size["subtitle"]))
    lay.addWidget(subtitle)

    bar = QProgressBar()
    bar.setObjectName("progress")
    bar.setRange(0, 100)
    bar.setValue(0)
    bar.setTextVisible(False)
    bar.setFixedHeight(size["progress_height"])
    bar.setAccessibleName("Session progress")
    lay.addWidget(bar)

    return rc, {"title": title, "subtitle": subtitle, "progress": bar}


# ---------------------------------------------------------------------------
# Text helpers
# ---------------------------------------------------------------------------

def focus_text(snap):
    return f"Focus Duration: {minutes_to_duration(snap.focus_minutes)}"


def break_text(snap):
    return f"Break Duration: {minutes_to_duration(snap.break_minutes)}"


def session_title(snap):
    """e.g. "Focusing for 25:00 minutes".  Empty while idle."""
    if snap.phase is None:
        return ""
    return f"{snap.phase.value} for {minutes_to_duration(snap.phase_minutes)} minutes"


def session_subtitle(snap):
    if snap.time_remaining is None:
        return ""
    return f"{seconds_to_duration(snap.time_remaining)} remaining"


def play_pause_glyph(running):
    return PAUSE_GLYPH if running else PLAY_GLYPH
