import sys
import traceback

from controller import PollingController
from log_utils import install_excepthook, log_action, log_error
from tray import TrayIcon


def main():
    install_excepthook()
    log_action("App started")

    tray = TrayIcon()
    controller = PollingController(tray)
    try:
        tray.run(
            on_ready=controller.start,
            on_show=controller.request_show,
            on_quit=controller.request_quit,
        )
    except Exception:
        log_error(traceback.format_exc())
        return 1

    log_action("Tray stopped")
    return 0


# === MAIN ===

if __name__ == "__main__":
    sys.exit(main())
