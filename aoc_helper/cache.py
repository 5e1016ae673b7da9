"""
Storage of puzzle inputs. A user's input for a given (year, day) never changes, so
once it has been downloaded it is safe to keep forever - no expiry, no re-fetch.
"""
from __future__ import annotations

import logging
import os
import typing as t
from dataclasses import dataclass
from datetime import datetime
from functools import total_ordering
from pathlib import Path

import urllib3

from . import utils
from .credentials import Credential
from .credentials import CredentialResolver
from .exceptions import CacheIOError
from .exceptions import FetchFailedError
from .exceptions import InvalidCredentialError
from .exceptions import PuzzleNotAvailableError
from .utils import aoc_now
from .utils import atomic_write_file
from .utils import HttpClient
from .utils import is_available


log = logging.getLogger(__name__)


AOC_HELPER_INPUT_DIR = Path(os.environ.get("AOC_HELPER_INPUT_DIR", "inputs")).expanduser()
URL = "https://adventofcode.com/{year}/day/{day}/input"


@total_ordering
@dataclass(frozen=True)
class CacheKey:
    year: int
    day: int

    def __str__(self) -> str:
        return f"{self.year}/{self.day:02d}"

    def __lt__(self, other: CacheKey) -> bool:
        return (self.year, self.day) < (other.year, other.day)

    @property
    def url(self) -> str:
        return URL.format(year=self.year, day=self.day)


@dataclass(frozen=True)
class CachedInput:
    key: CacheKey
    text: str


@t.runtime_checkable
class InputStore(t.Protocol):
    """Key-value backend for puzzle inputs. Any object with these methods will do."""

    def load(self, key: CacheKey) -> str | None:
        """Return the stored text for ``key``, or None if nothing was stored yet."""
        ...

    def save(self, key: CacheKey, text: str) -> None:
        """Durably store ``text`` for ``key``. Readers must never see partial text."""
        ...

    def location(self, key: CacheKey) -> str:
        """Human readable description of where ``key`` lives, for logs and errors."""
        ...


class FileInputStore:
    """One plain text file per puzzle input, at <base_dir>/<year>/day<day>.txt"""

    def __init__(self, base_dir: Path | str | None = None) -> None:
        if base_dir is None:
            base_dir = AOC_HELPER_INPUT_DIR
        self.base_dir = Path(base_dir).expanduser()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.base_dir)!r})"

    def path(self, key: CacheKey) -> Path:
        return self.base_dir / str(key.year) / f"day{key.day}.txt"

    def location(self, key: CacheKey) -> str:
        return str(self.path(key))

    def load(self, key: CacheKey) -> str | None:
        path = self.path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as err:
            raise CacheIOError(f"failed reading cached input {path}: {err}") from err

    def save(self, key: CacheKey, text: str) -> None:
        path = self.path(key)
        try:
            atomic_write_file(path, text)
        except OSError as err:
            raise CacheIOError(f"failed writing cached input {path}: {err}") from err


class MemoryInputStore:
    """Process-local store, useful in tests or when nothing should hit the disk."""

    def __init__(self, data: t.Mapping[CacheKey, str] | None = None) -> None:
        self.data: dict[CacheKey, str] = dict(data or {})

    def location(self, key: CacheKey) -> str:
        return f"memory:{key}"

    def load(self, key: CacheKey) -> str | None:
        return self.data.get(key)

    def save(self, key: CacheKey, text: str) -> None:
        self.data[key] = text


class InputCache:
    """
    Maps a CacheKey to the puzzle input text, requesting it from adventofcode.com
    only on a cache miss. The session token is resolved lazily on the first miss,
    and then reused for the lifetime of this cache.
    """

    def __init__(
        self,
        store: InputStore | None = None,
        resolver: CredentialResolver | None = None,
        http: HttpClient | None = None,
        clock: t.Callable[[], datetime] | None = None,
    ) -> None:
        if store is None:
            store = FileInputStore()
        if resolver is None:
            resolver = CredentialResolver.from_environment()
        self.store = store
        self.resolver = resolver
        self.http = http if http is not None else utils.http
        self.clock = clock or aoc_now
        self._credential: Credential | None = None

    @property
    def credential(self) -> Credential:
        if self._credential is None:
            self._credential = self.resolver.resolve()
        return self._credential

    def get(self, key: CacheKey) -> CachedInput:
        text = self.store.load(key)
        if text is not None:
            log.debug("input cache hit %s", self.store.location(key))
            return CachedInput(key=key, text=text)
        log.debug("input cache miss %s", self.store.location(key))
        text = self._fetch(key)
        log.info("saving the puzzle input for %s to %s", key, self.store.location(key))
        self.store.save(key, text)
        return CachedInput(key=key, text=text)

    def _fetch(self, key: CacheKey) -> str:
        if not is_available(key.year, key.day, now=self.clock()):
            raise PuzzleNotAvailableError(f"{key} not available yet")
        token = self.credential.token
        log.info("getting data year=%s day=%s", key.year, key.day)
        try:
            response = self.http.get(key.url, token=token)
        except urllib3.exceptions.HTTPError as err:
            raise FetchFailedError(f"failed to connect to {key.url}: {err}") from err
        if response.status == 200:
            try:
                return response.data.decode()
            except UnicodeDecodeError as err:
                raise FetchFailedError(f"undecodable input at {key.url}", status=200) from err
        if response.status == 404:
            raise PuzzleNotAvailableError(f"{key} not available yet")
        if response.status in (400, 401, 403):
            log.info("session is dead - status_code=%s", response.status)
            raise InvalidCredentialError(f"the auth token from {self.credential.source} was rejected")
        log.error("got %s status code for %s", response.status, key)
        log.error(response.data.decode(errors="replace"))
        raise FetchFailedError(f"HTTP {response.status} at {key.url}", status=response.status)
