import re

from raidip_config import IP_PATTERN, RAID_MARKER
from raidip_errors import LogAccessError, NoMatchError, PatternMismatchError

_ip_re = re.compile(IP_PATTERN, re.ASCII)


def last_matching_line(lines, marker=RAID_MARKER):
    latest = None
    for line in lines:
        if marker in line:
            latest = line
    return latest


def ip_from_line(line):
    match = _ip_re.search(line)
    if match is None:
        raise PatternMismatchError("could not extract IP from line")
    return match.group(1)


def extract_ip(log_file_path):
    try:
        with open(log_file_path, "r", encoding="utf-8", errors="replace") as f:
            latest_line = last_matching_line(f)
    except OSError as e:
        raise LogAccessError(f"cannot read log file {log_file_path}: {e}") from e

    if latest_line is None:
        raise NoMatchError("no matching line found in log file")
    return ip_from_line(latest_line.rstrip("\r\n"))
