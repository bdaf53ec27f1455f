import os
import sys

# === CONFIG ===

APP_NAME = "Raid IP Tray"

BASE_DIR = r"C:\Battlestate Games\EFT\Logs"
LOG_DIR_PREFIX = "log_"
LOG_FILE_SUFFIX = " application.log"

RAID_MARKER = "RaidMode: Online,"
IP_PATTERN = r"Ip: ([\d\.]+),"

GEO_API_URL = "https://api.iplocation.net/"

POLL_INTERVAL_SEC = 60
TIME_FORMAT = "%H:%M"

IP_UNKNOWN_TEXT = "IP not yet determined"

# Written next to the launched script (or the frozen exe)
LOG_FILE = os.path.join(os.path.dirname(os.path.abspath(sys.argv[0])), "logs.txt")
