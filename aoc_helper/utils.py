from __future__ import annotations

import logging
import os
import platform
import shutil
import time
import typing as t
from collections import deque
from datetime import datetime
from pathlib import Path
from tempfile import NamedTemporaryFile
from zoneinfo import ZoneInfo

import termcolor
import urllib3

from .version import __version__

log: logging.Logger = logging.getLogger(__name__)
AOC_TZ = ZoneInfo("America/New_York")
FIRST_YEAR = 2015
LAST_DAY = 25
USER_AGENT = f"aoc-helper/{__version__} urllib3"


class HttpClient:
    # every request to adventofcode.com goes through this wrapper
    # so that we can put in user agent header, rate-limit, etc.

    pool_manager: urllib3.PoolManager
    req_count: dict[t.Literal["GET"], int]

    def __init__(self) -> None:
        proxy_url = os.environ.get("http_proxy") or os.environ.get("https_proxy")
        if proxy_url:
            self.pool_manager = urllib3.ProxyManager(proxy_url, headers={"User-Agent": USER_AGENT})
        else:
            self.pool_manager = urllib3.PoolManager(headers={"User-Agent": USER_AGENT})
        self.req_count = {"GET": 0}
        self._max_t = 3.0
        self._cooloff = 0.16
        self._history = deque([time.time() - self._max_t] * 4, maxlen=4)

    def _limiter(self) -> None:
        now = time.time()
        t0 = self._history[0]
        if now - t0 < self._max_t:
            # made 4 requests within 3 seconds - past the speed limit of 1 req/second.
            # delay 160ms initially, then increasing exponentially for repeat offenders
            log.warning("you're being rate-limited - slow down on the requests! (delay=%.02fs)", self._cooloff)
            time.sleep(self._cooloff)
            self._cooloff = min(self._cooloff * 2, 10)
        self._history.append(now)

    def get(self, url: str, token: str) -> urllib3.BaseHTTPResponse:
        headers = self.pool_manager.headers | {"Cookie": f"session={token}"}
        self._limiter()
        # a single attempt: no retries on connection errors, redirects are not followed
        resp = self.pool_manager.request("GET", url, headers=headers, retries=False)
        self.req_count["GET"] += 1
        return resp


http: HttpClient = HttpClient()


def _ensure_intermediate_dirs(path: Path) -> None:
    path.expanduser().parent.mkdir(parents=True, exist_ok=True)


def atomic_write_file(path: Path, contents_str: str) -> None:
    """
    Atomically write a string to a file by writing it to a temporary file, and then
    renaming it to the final destination name. Existence of the final file therefore
    always means the content is complete.
    """
    _ensure_intermediate_dirs(path)
    with NamedTemporaryFile("w", dir=path.parent, encoding="utf-8", delete=False) as f:
        log.debug("writing to tempfile @ %s", f.name)
        try:
            f.write(contents_str)
        except BaseException:
            f.close()
            os.unlink(f.name)
            raise
    log.debug("moving %s -> %s", f.name, path)
    try:
        shutil.move(f.name, path)
    except BaseException:
        log.debug("removing leftover tempfile %s", f.name)
        os.unlink(f.name)
        raise


def aoc_now() -> datetime:
    return datetime.now(tz=AOC_TZ)


def unlock_time(year: int, day: int) -> datetime:
    """Puzzles unlock at midnight EST/UTC-5 on each day of December."""
    return datetime(year, 12, day, tzinfo=AOC_TZ)


def is_available(year: int, day: int, now: datetime | None = None) -> bool:
    """
    Whether a puzzle ever existed (or exists yet) for the given year and day.
    Advent of Code started in 2015 and runs from the 1st to the 25th of December.
    """
    if year < FIRST_YEAR or not 1 <= day <= LAST_DAY:
        return False
    if now is None:
        now = aoc_now()
    return now >= unlock_time(year, day)


_ANSIColor = t.Literal[
    "black", "red", "green", "yellow", "blue", "magenta", "cyan", "white",
    "light_green", "light_cyan", "light_yellow",
]
if platform.system() == "Windows":
    import colorama

    colorama.just_fix_windows_console()


def colored(txt: str, color: _ANSIColor | None) -> str:
    if color is None:
        return txt
    return termcolor.colored(txt, color)
