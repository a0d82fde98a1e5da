import json
import os

from python_config import PythonConfig, Version
from python_config import scripts
from python_config.commander import Commander

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class StaticCommander(Commander):
    """
    Answers query scripts from a fixed table instead of spawning an interpreter.
    Unknown scripts answer `null`, like sysconfig does for undefined variables.
    """

    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    def command(self, *args):
        self.calls.append(args)
        assert args[0] == "-c"
        return self.responses.get(args[1], "null")


def make_responses(version, config_vars=None, paths=None, abiflags=None):
    """
    Build the table StaticCommander answers from.
    :param version: (major, minor, micro) the interpreter reports
    :param config_vars: sysconfig config variables
    :param paths: sysconfig paths
    :param abiflags: sys.abiflags, absent when None
    :return: script -> output mapping
    """
    responses = {scripts.VERSION: json.dumps(".".join(str(part) for part in version))}
    for name, value in (config_vars or {}).items():
        responses[scripts.config_var(name)] = json.dumps(value)
    for name, value in (paths or {}).items():
        responses[scripts.path(name)] = json.dumps(value)
    if abiflags is not None:
        responses[scripts.sys_attr("abiflags")] = json.dumps(abiflags)
    return responses


# Python 3.12 as packaged by Debian, static libpython
PY312 = dict(
    version=(3, 12, 3),
    config_vars={
        "prefix": "/usr",
        "exec_prefix": "/usr",
        "VERSION": "3.12",
        "CFLAGS": "-Wsign-compare -DNDEBUG -g -fwrapv -O2 -Wall",
        "LIBPYTHON": "",
        "LIBS": "-ldl",
        "SYSLIBS": "-lm",
        "Py_ENABLE_SHARED": 0,
        "LIBPL": "/usr/lib/python3.12/config-3.12-x86_64-linux-gnu",
        "EXT_SUFFIX": ".cpython-312-x86_64-linux-gnu.so",
        "PYTHONFRAMEWORK": "",
        "LINKFORSHARED": "-Xlinker -export-dynamic",
    },
    paths={
        "include": "/usr/include/python3.12",
        "platinclude": "/usr/include/python3.12",
    },
    abiflags="",
)

# Python 3.7 still links libpython and carries the pymalloc 'm' ABI flag
PY37 = dict(
    version=(3, 7, 2),
    config_vars={
        "prefix": "/opt/python3.7",
        "exec_prefix": "/opt/python3.7",
        "VERSION": "3.7",
        "CFLAGS": "-Wno-unused-result -Wsign-compare  -DNDEBUG -g -fwrapv -O3 -Wall",
        "LIBS": "-lcrypt -lpthread -ldl  -lutil",
        "SYSLIBS": "-lm",
        "Py_ENABLE_SHARED": 0,
        "LIBPL": "/opt/python3.7/lib/python3.7/config-3.7m-x86_64-linux-gnu",
        "EXT_SUFFIX": ".cpython-37m-x86_64-linux-gnu.so",
        "PYTHONFRAMEWORK": "",
        "LINKFORSHARED": "-Xlinker -export-dynamic",
    },
    paths={
        "include": "/opt/python3.7/include/python3.7m",
        "platinclude": "/opt/python3.7/include/python3.7m",
    },
    abiflags="m",
)

PY27 = dict(
    version=(2, 7, 18),
    config_vars={
        "prefix": "/usr",
        "exec_prefix": "/usr",
        "VERSION": "2.7",
        "CFLAGS": "-fno-strict-aliasing -DNDEBUG -g -fwrapv -O2 -Wall",
        "LIBS": "-lpthread -ldl  -lutil",
        "SYSLIBS": "-lm",
        "Py_ENABLE_SHARED": 1,
        "LIBPL": "/usr/lib/python2.7/config-x86_64-linux-gnu",
        "PYTHONFRAMEWORK": "",
        "LINKFORSHARED": "-Xlinker -export-dynamic",
    },
    paths={
        "include": "/usr/include/python2.7",
        "platinclude": "/usr/include/x86_64-linux-gnu/python2.7",
    },
)


def make_config(interpreter, version=Version.THREE, **config_vars):
    """
    PythonConfig over a canned interpreter; keyword arguments override config variables.
    """
    overridden = dict(interpreter, config_vars={**interpreter["config_vars"], **config_vars})
    return PythonConfig(version, StaticCommander(make_responses(**overridden)))
