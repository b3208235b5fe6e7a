import sys
from pomo.common.logger import log
from pomo.ui.app import main

# Entry point for `python -m pomo` and the pomodoro-timer script
def run() -> None:
    try:
        main()
    except SystemExit:
        raise
    except Exception:
        # Full stack trace, always
        log.exception("Uncaught exception in entrypoint, exiting")
        sys.exit(1)

if __name__ == "__main__":
    run()
