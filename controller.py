import queue
import threading
import traceback
from datetime import datetime

from raidip_config import BASE_DIR, IP_UNKNOWN_TEXT, POLL_INTERVAL_SEC, TIME_FORMAT
from raidip_errors import RaidIpError
from geo import resolve_country
from ip_extractor import extract_ip
from log_locator import find_latest_log_file
from log_utils import log_action, log_error
from raidip_models import LatestObservation

SHOW = "show"
QUIT = "quit"


class PollingController:
    """
    Runs the locate -> extract -> resolve cycle and owns the latest observation.

    Tray callbacks only enqueue events; the control loop (run) is the single
    thread that reads or replaces the observation, so no lock is needed.
    """

    def __init__(self, tray, log_root=BASE_DIR, interval=POLL_INTERVAL_SEC):
        self.tray = tray
        self.log_root = log_root
        self.interval = interval
        self._observation = LatestObservation()
        self._events = queue.Queue()
        self._thread = None

    @property
    def observation(self):
        return self._observation

    # === TRIGGERS (any thread) ===

    def request_show(self):
        self._events.put(SHOW)

    def request_quit(self):
        self._events.put(QUIT)

    # === CONTROL LOOP ===

    def start(self):
        self._thread = threading.Thread(target=self.run, daemon=True)
        self._thread.start()
        log_action("Started IP polling thread")

    def run(self):
        self._safe_tick()
        while True:
            try:
                event = self._events.get(timeout=self.interval)
            except queue.Empty:
                self._safe_tick()
                continue

            try:
                if event == QUIT:
                    log_action("Exiting app via tray")
                    self.tray.stop()
                    return
                if event == SHOW:
                    self.show()
            except Exception:
                log_error(traceback.format_exc())

    def _safe_tick(self):
        try:
            self.tick()
        except Exception:
            log_error(traceback.format_exc())

    def tick(self):
        """One poll cycle. Returns True when the observation was replaced."""
        try:
            log_file_path = find_latest_log_file(self.log_root)
        except RaidIpError as e:
            log_error(f"Error retrieving log file: {e}")
            return False

        try:
            ip = extract_ip(log_file_path)
        except RaidIpError as e:
            log_error(f"Error extracting IP: {e}")
            return False

        try:
            country_name = resolve_country(ip)
        except RaidIpError as e:
            log_error(f"Error getting country name for IP: {e}")
            return False

        self._observation = LatestObservation(
            ip=ip,
            observed_at=datetime.now().strftime(TIME_FORMAT),
            country_name=country_name,
        )
        self.tray.set_tooltip(tooltip_text(self._observation))
        return True

    def show(self):
        obs = self._observation
        if obs.known:
            text = title_text(obs)
            self.tray.set_title(text)
            log_action(text)
        else:
            self.tray.set_title(IP_UNKNOWN_TEXT)


def tooltip_text(obs):
    return f"IP: {obs.ip} | Country: {obs.country_name} | Last Updated: {obs.observed_at}"


def title_text(obs):
    # Country is only part of the tooltip
    return f"IP: {obs.ip} | Last Updated: {obs.observed_at}"
