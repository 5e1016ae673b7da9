from . import cache
from . import cli
from . import credentials
from . import exceptions
from . import models
from . import runner
from . import transforms
from . import utils
from .cache import CacheKey
from .cache import CachedInput
from .cache import FileInputStore
from .cache import InputCache
from .cache import InputStore
from .cache import MemoryInputStore
from .credentials import Credential
from .credentials import CredentialResolver
from .exceptions import AocHelperError
from .exceptions import CacheIOError
from .exceptions import FetchFailedError
from .exceptions import InvalidCredentialError
from .exceptions import MissingCredentialError
from .exceptions import PuzzleNotAvailableError
from .models import Day
from .models import Example
from .models import ExampleResult
from .models import Puzzle
from .models import TestReport
from .runner import solve
from .version import __version__

__all__ = [
    "AocHelperError",
    "CacheIOError",
    "CacheKey",
    "CachedInput",
    "Credential",
    "CredentialResolver",
    "Day",
    "Example",
    "ExampleResult",
    "FetchFailedError",
    "FileInputStore",
    "InputCache",
    "InputStore",
    "InvalidCredentialError",
    "MemoryInputStore",
    "MissingCredentialError",
    "Puzzle",
    "PuzzleNotAvailableError",
    "TestReport",
    "__version__",
    "cache",
    "cli",
    "credentials",
    "exceptions",
    "models",
    "runner",
    "solve",
    "transforms",
    "utils",
]
