import pytest

from python_config import MalformedOutputError, PythonVersion, Version


@pytest.mark.smoke
@pytest.mark.parametrize("text, expected", [
    pytest.param("3.7.2", PythonVersion(3, 7, 2), id="plain"),
    pytest.param("Python 3.7.2", PythonVersion(3, 7, 2), id="--version output"),
    pytest.param("Python 2.7.18\n", PythonVersion(2, 7, 18), id="python2 trailing newline"),
    pytest.param("3.13.0rc1", PythonVersion(3, 13, 0), id="pre-release"),
    pytest.param("2.7", PythonVersion(2, 7, 0), id="no micro"),
])
def test_parse(text, expected):
    assert PythonVersion.parse(text) == expected


@pytest.mark.smoke
@pytest.mark.parametrize("text", ["", "Python", "three.seven", "Python X.Y.Z"])
def test_parse_malformed(text):
    with pytest.raises(MalformedOutputError):
        PythonVersion.parse(text)


@pytest.mark.smoke
def test_ordering():
    assert PythonVersion(3, 10, 0) > PythonVersion(3, 9, 7)
    assert PythonVersion(3, 8, 0) >= (3, 8)
    assert PythonVersion(3, 7, 9) < (3, 8)
    assert PythonVersion(2, 7, 18) < PythonVersion(3, 0, 0)
    assert str(PythonVersion(3, 12, 1)) == "3.12.1"


@pytest.mark.smoke
def test_selectable_version():
    assert Version.THREE.program == "python3"
    assert Version.TWO.program == "python2"
    assert Version.from_major(2) is Version.TWO
    with pytest.raises(MalformedOutputError):
        Version.from_major(4)
