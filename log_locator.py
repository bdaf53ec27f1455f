import os

from raidip_config import LOG_DIR_PREFIX, LOG_FILE_SUFFIX
from raidip_errors import LogAccessError, NotFoundError
from log_utils import log_action


def _newest_directory(root_dir):
    try:
        with os.scandir(root_dir) as entries:
            candidates = [
                (entry.stat().st_mtime, entry.name)
                for entry in entries
                if entry.is_dir()
            ]
    except OSError as e:
        raise LogAccessError(f"cannot read log directory {root_dir}: {e}") from e

    if not candidates:
        raise NotFoundError(f"no directories found in {root_dir}")
    # Equal mtimes fall back to the name, so the last one alphabetically wins
    return max(candidates)[1]


def log_file_name(session_dir_name):
    """'log_2024.01.02_3-04-05_0.14.0' -> '2024.01.02_3-04-05_0.14.0 application.log'"""
    stamp = session_dir_name
    if stamp.startswith(LOG_DIR_PREFIX):
        stamp = stamp[len(LOG_DIR_PREFIX):]
    return stamp + LOG_FILE_SUFFIX


def find_latest_log_file(root_dir):
    latest_dir = _newest_directory(root_dir)
    log_action(f"Latest directory: {latest_dir}")

    log_file_path = os.path.join(root_dir, latest_dir, log_file_name(latest_dir))
    log_action(f"Trying to open log file at path: {log_file_path}")
    return log_file_path
