from datetime import datetime
import sys
import threading
import traceback

import raidip_config

def log_action(message):
    _write("[ACTION] " + message)

def log_error(message):
    _write(message)

def _write(message):
    ts = f"[{datetime.now()}] "
    msg = ts + message.strip()
    print(msg)
    try:
        with open(raidip_config.LOG_FILE, "a", encoding="utf-8") as f:
            f.write(msg + "\n")
    except OSError:
        # Console output is enough when the log file is not writable
        pass

def handle_exception(exc_type, exc_value, exc_traceback):
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return
    error_msg = ''.join(traceback.format_exception(exc_type, exc_value, exc_traceback))
    log_error(error_msg)

def handle_thread_exception(args):
    handle_exception(args.exc_type, args.exc_value, args.exc_traceback)

def install_excepthook():
    sys.excepthook = handle_exception
    threading.excepthook = handle_thread_exception
