from __future__ import annotations

import logging
import os
import sys
import typing as t
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path
from textwrap import dedent

from ._compat import tomllib
from .exceptions import AocHelperError
from .exceptions import MissingCredentialError
from .utils import colored


log = logging.getLogger(__name__)


SESSION_ENV_VAR = "AOC_SESSION_ID"
CONFIG_KEY = "session-id"
AOC_HELPER_CONFIG = Path(os.environ.get("AOC_HELPER_CONFIG", "aoc_helper.toml")).expanduser()


@dataclass(frozen=True)
class Credential:
    """
    The value of the ``session`` cookie set by adventofcode.com after login. Puzzle
    inputs differ by user, so every input request must carry it.
    The token itself never appears in the repr.
    """

    token: str = field(repr=False)
    source: str = "override"

    def __str__(self) -> str:
        return f"<{type(self).__name__} from {self.source}>"


class CredentialResolver:
    """
    Finds the session token, in priority order, from:
        1) an explicit override string
        2) the AOC_SESSION_ID environment variable
        3) the ``session-id`` key of a TOML config file (only if use_config_file)
    The environment mapping is injected rather than read from os.environ at call time.
    """

    def __init__(
        self,
        override: str | None = None,
        environ: t.Mapping[str, str] | None = None,
        config_path: Path | str | None = None,
        use_config_file: bool = False,
    ) -> None:
        self.override = override
        self.environ = {} if environ is None else environ
        self.config_path = Path(config_path) if config_path is not None else AOC_HELPER_CONFIG
        self.use_config_file = use_config_file

    @classmethod
    def from_environment(
        cls, override: str | None = None, use_config_file: bool = True
    ) -> CredentialResolver:
        return cls(
            override=override,
            environ=dict(os.environ),
            use_config_file=use_config_file,
        )

    def _from_config_file(self) -> str | None:
        path = self.config_path
        try:
            txt = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            log.debug("no config file at %s", path)
            return None
        config = tomllib.loads(txt)
        value = config.get(CONFIG_KEY)
        if value is not None and not isinstance(value, str):
            raise AocHelperError(f"{CONFIG_KEY!r} in {path} must be a string")
        return value

    def _candidates(self) -> t.Iterator[tuple[str, str | None]]:
        # the config file is only read when the earlier sources came up empty
        yield "override", self.override
        yield SESSION_ENV_VAR, self.environ.get(SESSION_ENV_VAR)
        if self.use_config_file:
            yield str(self.config_path), self._from_config_file()

    def resolve(self) -> Credential:
        for source, value in self._candidates():
            token = (value or "").strip()
            if token:
                log.debug("session token found in %s", source)
                return Credential(token=token, source=source)
        msg = dedent(
            f"""\
            ERROR: AoC session ID is needed to get your puzzle data!
            You can find it in your browser cookies after login.
                1) Export the cookie in environment variable {SESSION_ENV_VAR}, or
                2) Put it in {self.config_path} as {CONFIG_KEY} = "<token>", or
                3) Pass it explicitly as the session override
            """
        )
        print(colored(msg, color="red"), file=sys.stderr)
        raise MissingCredentialError("Missing session ID")
