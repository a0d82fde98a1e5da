from .config import PythonConfig
from .errors import (
    InterpreterNotFoundError,
    MalformedOutputError,
    PythonConfigError,
    QueryError,
    UnsupportedFieldError,
    VersionMismatchError,
)
from .version import PythonVersion, Version

__version__ = "0.1.2"
