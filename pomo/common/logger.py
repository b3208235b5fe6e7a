import logging
from pathlib import Path
from logging.handlers import RotatingFileHandler
from pomo.common.setup import PATHS
from datetime import datetime

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(filename)s:%(lineno)d] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Attaches the handler under the given name unless one with that name is already on the logger, so repeated
# get_logger() calls never double up output.
def _attach(logger: logging.Logger, handler_name: str, make_handler, level, fmt) -> bool:
    if any(h.get_name() == handler_name for h in logger.handlers):
        return False
    handler = make_handler()
    handler.setLevel(level)
    handler.setFormatter(fmt)
    handler.set_name(handler_name)
    logger.addHandler(handler)
    return True

# Deletes all but the newest `keep` per-run debug logs.
def _prune_debug_runs(debug_dir: Path, name: str, keep: int):
    runs = sorted(debug_dir.glob(f"{name}_*.log"), key=lambda p: p.stat().st_mtime, reverse=True)
    for run in runs[keep:]:
        try: run.unlink()
        except OSError: pass

def get_logger(
        name = "pomodoro_timer",
        level = logging.INFO,
        log_dir: Path | None = None,
        max_bytes = 5 * 1024 * 1024,
        backup_count = 5,
        persistent = True,
        console = False,
        historical_debugs: int = 10
) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.propagate = False
    logger.setLevel(min(level, logging.DEBUG) if historical_debugs > 0 else level)

    log_dir = log_dir or PATHS.logs
    log_dir.mkdir(parents=True, exist_ok=True)
    fmt = logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT)

    # Rotating log that survives across runs
    if persistent:
        _attach(logger, f"{name}:persistent",
                lambda: RotatingFileHandler(
                    filename=log_dir / f"{name}.log",
                    maxBytes=max_bytes,
                    backupCount=backup_count,
                    encoding="utf-8",
                ),
                level, fmt)

    # latest.log only ever holds the current run
    _attach(logger, f"{name}:latest",
            lambda: logging.FileHandler(log_dir / "latest.log", mode="w", encoding="utf-8"),
            level, fmt)

    # One full DEBUG log per run, oldest runs pruned
    if historical_debugs > 0:
        debug_dir = log_dir / "debug"
        debug_dir.mkdir(parents=True, exist_ok=True)
        this_run = debug_dir / f"{name}_{datetime.now():%Y-%m-%d_%H-%M-%S}.log"
        if _attach(logger, f"{name}:historical_debug",
                   lambda: logging.FileHandler(this_run, encoding="utf-8"),
                   logging.DEBUG, fmt):
            _prune_debug_runs(debug_dir, name, historical_debugs)

    if console:
        _attach(logger, f"{name}:console", logging.StreamHandler, level, fmt)

    return logger

log = get_logger(level=logging.INFO, console=False, historical_debugs=10)
log.info("=== STARTED POMODORO TIMER ===")
