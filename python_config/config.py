"""
Python distribution information, the way `python[3]-config` reports it.

Values come from the interpreter itself, so a `python-config` script does not
have to be installed. Python 3 is the default; pass `Version.TWO` for Python 2.
"""
import functools
import json
import os
from logging import getLogger

from . import scripts
from .commander import Commander, SysCommander
from .errors import MalformedOutputError, UnsupportedFieldError, VersionMismatchError
from .version import PythonVersion, Version

logger = getLogger(__name__)

INTERPRETER_ENV = "PYTHON_CONFIG_INTERPRETER"

# First version where --libs/--ldflags stop linking libpython unless embedding
LIBPYTHON_OPTIONAL_SINCE = PythonVersion(3, 8)
ABIFLAGS_SINCE = PythonVersion(3, 2)


def _memoized(method):
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        key = (method.__name__, *args, *sorted(kwargs.items()))
        try:
            return self._cache[key]
        except KeyError:
            pass
        value = method(self, *args, **kwargs)
        self._cache[key] = value
        return value
    return wrapper


def _accessor(method):
    """Memoized accessor that first checks the interpreter is the selected major version."""
    @functools.wraps(method)
    def checked(self, *args, **kwargs):
        self.semantic_version()
        return method(self, *args, **kwargs)
    return _memoized(checked)


class PythonConfig:
    """Exposes Python distribution information for one interpreter."""

    def __init__(self, version: Version = Version.THREE, commander: Commander = None):
        if commander is None:
            commander = SysCommander(os.environ.get(INTERPRETER_ENV) or version.program)
        self.version = version
        self.commander = commander
        self._cache = {}

    @classmethod
    def from_interpreter(cls, program: str, version: Version = None) -> "PythonConfig":
        """
        Create a config for a specific interpreter.
        :param program: interpreter name or path
        :param version: expected major version, detected from the interpreter when None
        """
        commander = SysCommander(program)
        if version is not None:
            return cls(version, commander)
        config = cls(Version.THREE, commander)
        reported = config._reported_version()
        config.version = Version.from_major(reported.major)
        config._cache[("semantic_version",)] = reported
        return config

    def __repr__(self):
        return f"PythonConfig({self.version}, {self.commander!r})"

    def _run(self, script):
        output = self.commander.command("-c", script)
        try:
            return json.loads(output)
        except ValueError:
            raise MalformedOutputError(f"unable to parse interpreter output {output!r}") from None

    def _reported_version(self):
        reported = self._run(scripts.VERSION)
        if not isinstance(reported, str):
            raise MalformedOutputError(f"expected a version string, got {reported!r}")
        return PythonVersion.parse(reported)

    def _require(self, name):
        value = self.config_var(name)
        if value is None:
            raise MalformedOutputError(f"interpreter does not define {name}")
        return value

    def _split(self, name):
        value = self.config_var(name)
        return str(value).split() if value else []

    def _unsupported_on_two(self, field):
        if self.version is Version.TWO:
            raise UnsupportedFieldError(field, self.semantic_version())

    @_memoized
    def semantic_version(self) -> PythonVersion:
        """Returns the interpreter version, checked against the selected major version."""
        version = self._reported_version()
        logger.debug(f"{self.commander!r} reports Python {version}")
        if version.major != self.version.major:
            raise VersionMismatchError(
                f"{self.commander!r} reports Python {version}, expected Python {self.version.major}")
        return version

    @_accessor
    def config_var(self, name: str):
        """Raw value of a `sysconfig` config variable, None when undefined."""
        return self._run(scripts.config_var(name))

    @_accessor
    def prefix(self) -> str:
        return self._require("prefix")

    @_accessor
    def exec_prefix(self) -> str:
        return self._require("exec_prefix")

    @_accessor
    def includes(self) -> str:
        """Include paths, prefixed with '-I'."""
        paths = []
        for name in ("include", "platinclude"):
            path = self._run(scripts.path(name))
            if path is None:
                raise MalformedOutputError(f"interpreter does not define the {name} path")
            paths.append("-I" + path)
        return " ".join(paths)

    @_accessor
    def cflags(self) -> str:
        return " ".join([self.includes(), *self._split("CFLAGS")])

    @_accessor
    def abiflags(self) -> str:
        version = self.semantic_version()
        if version < ABIFLAGS_SINCE:
            raise UnsupportedFieldError("abiflags", version)
        flags = self._run(scripts.sys_attr("abiflags"))
        if flags is None:
            raise MalformedOutputError("interpreter does not define sys.abiflags")
        return flags

    def embed_supported(self) -> bool:
        """Whether --embed exists for this interpreter (Python 3.8+)."""
        version = self.semantic_version()
        return self.version is Version.THREE and version >= LIBPYTHON_OPTIONAL_SINCE

    def _libs(self, embed):
        version = self.semantic_version()
        pyver = self._require("VERSION")
        if embed and not self.embed_supported():
            raise UnsupportedFieldError("embed", version)
        if self.version is Version.TWO:
            return [*self._split("LIBS"), *self._split("SYSLIBS"), "-lpython" + pyver]

        libs = []
        if version < LIBPYTHON_OPTIONAL_SINCE or embed:
            libs.append("-lpython" + pyver + self.abiflags())
        else:
            libs += self._split("LIBPYTHON")
        return [*libs, *self._split("LIBS"), *self._split("SYSLIBS")]

    @_accessor
    def libs(self, embed: bool = False) -> str:
        """
        Libraries to link against.
        :param embed: link libpython even on Python 3.8+, for applications embedding Python
        """
        return " ".join(self._libs(embed))

    @_accessor
    def ldflags(self, embed: bool = False) -> str:
        """Linker flags: libs plus the config dir when there is no shared libpython."""
        flags = self._libs(embed)
        # add the prefix/lib/pythonX.Y/config dir, but only if there is no shared library in prefix/lib/
        if not self.config_var("Py_ENABLE_SHARED"):
            flags.insert(0, "-L" + self._require("LIBPL"))
        if self.semantic_version() < LIBPYTHON_OPTIONAL_SINCE and not self.config_var("PYTHONFRAMEWORK"):
            flags += self._split("LINKFORSHARED")
        return " ".join(flags)

    @_accessor
    def configdir(self) -> str:
        self._unsupported_on_two("configdir")
        return self._require("LIBPL")

    @_accessor
    def extension_suffix(self) -> str:
        self._unsupported_on_two("extension_suffix")
        return self._require("EXT_SUFFIX")
