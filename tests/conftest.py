import pook as pook_mod
import pytest

from aoc_helper.cache import FileInputStore
from aoc_helper.cache import InputCache
from aoc_helper.credentials import CredentialResolver
from aoc_helper.utils import http


@pytest.fixture(autouse=True)
def mocked_sleep(mocker):
    no_sleep_till_brooklyn = mocker.patch("time.sleep")
    # nerf the rate-limiter - tests don't actually talk to AoC server at all
    http._max_t = -1.0
    return no_sleep_till_brooklyn


@pytest.fixture(autouse=True)
def remove_user_env(monkeypatch, tmp_path):
    monkeypatch.delenv("AOC_SESSION_ID", raising=False)
    monkeypatch.setattr("aoc_helper.cache.AOC_HELPER_INPUT_DIR", tmp_path / "inputs")
    monkeypatch.setattr("aoc_helper.credentials.AOC_HELPER_CONFIG", tmp_path / "aoc_helper.toml")


@pytest.fixture
def input_dir(tmp_path):
    path = tmp_path / "inputs"
    path.mkdir()
    return path


@pytest.fixture
def config_file(tmp_path):
    return tmp_path / "aoc_helper.toml"


@pytest.fixture
def resolver():
    return CredentialResolver(environ={"AOC_SESSION_ID": "thetesttoken"})


@pytest.fixture
def input_cache(input_dir, resolver):
    return InputCache(store=FileInputStore(input_dir), resolver=resolver)


@pytest.fixture
def pook():
    pook_mod.on()
    yield pook_mod
    pook_mod.off()
    pook_mod.reset()
