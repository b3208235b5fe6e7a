import os
import sys
from pathlib import Path
from dataclasses import dataclass

APP_DIR_NAME = "PomodoroTimer"

# Creates the directory if it's missing and hands the path back, so it can be used inline.
def ensure_directory(path: Path):
    path.mkdir(parents=True, exist_ok=True)
    return path

# Picks the per-user data folder. POMODORO_TIMER_HOME wins, then APPDATA on Windows, then the XDG data dir.
def _user_data_dir() -> Path:
    override = os.getenv("POMODORO_TIMER_HOME")
    if override:
        return Path(override)
    if sys.platform == "win32":
        appdata = os.getenv("APPDATA")
        if not appdata:
            raise RuntimeError("Missing APPDATA environment variable, cannot determine data directories.")
        return Path(appdata) / APP_DIR_NAME
    xdg = os.getenv("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    return Path(xdg) / "pomodoro-timer"

# Dataclass for accessing paths across program.
@dataclass(frozen=False)
class ProjectPaths:

    root: Path
    assets: Path
    data: Path
    logs: Path

    @staticmethod
    def build():
        # Install root. Frozen builds sit next to the exe, source runs use the repo checkout.
        if getattr(sys, "frozen", False):
            root = Path(sys.executable).resolve().parent
        else:
            root = Path(__file__).resolve().parents[2]

        # Assets are optional (icon and notification sound), so this one is never created or enforced.
        assets = root / "assets"

        data = ensure_directory(_user_data_dir())
        logs = ensure_directory(data / "logs")

        return ProjectPaths(
            root = root,
            assets = assets,
            data = data,
            logs = logs,
        )
PATHS = ProjectPaths.build()
