from .colors import THEMES


def build_stylesheet(theme_name, phase_key="progress"):
    """Qt stylesheet for the whole window.

    phase_key picks the progress chunk color, so the bar can change color on break.
    """
    t = THEMES.get(theme_name, THEMES["Light"])
    return f"""
        QMainWindow, QWidget {{ background-color: {t['bg']}; color: {t['text']}; }}
        QLabel#subtitle {{ color: {t['subtext']}; }}
        QPushButton {{
            background-color: {t['button_bg']}; color: {t['button_text']};
            border: none; border-radius: 4px; padding: 4px 10px;
        }}
        QPushButton:hover {{ background-color: {t['button_hover']}; }}
        QPushButton:disabled {{ color: {t['disabled_text']}; }}
        QPushButton#playPause {{ background-color: {t['primary_bg']}; color: {t['primary_text']}; }}
        QPushButton#playPause:hover {{ background-color: {t['primary_hover']}; }}
        QProgressBar {{ background-color: {t['progress_track']}; border: none; border-radius: 4px; }}
        QProgressBar::chunk {{ background-color: {t.get(phase_key, t['progress'])}; border-radius: 4px; }}
    """
