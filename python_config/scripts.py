"""
Inline query scripts passed to the interpreter with `-c`.
Every script prints a single JSON document, and must stay valid on Python 2.7 and 3.
"""

VERSION = "import json, sys; print(json.dumps('%d.%d.%d' % sys.version_info[:3]))"

_CONFIG_VAR = "import json, sysconfig; print(json.dumps(sysconfig.get_config_var({name!r})))"

_PATH = "import json, sysconfig; print(json.dumps(sysconfig.get_path({name!r})))"

_SYS_ATTR = "import json, sys; print(json.dumps(getattr(sys, {name!r}, None)))"


def config_var(name):
    return _CONFIG_VAR.format(name=str(name))


def path(name):
    return _PATH.format(name=str(name))


def sys_attr(name):
    return _SYS_ATTR.format(name=str(name))
