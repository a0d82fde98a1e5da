import shutil

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--run-equivalence",
        action="store_true",
        default=False,
        help="Compare the CLI output with the python3-config installed on this host",
    )
    parser.addoption(
        "--reference-script",
        action="store",
        help="Reference script to compare against",
        type=str,
        default="python3-config",
    )


@pytest.fixture
def reference_script(request):
    if not request.config.getoption("--run-equivalence"):
        pytest.skip("equivalence tests need --run-equivalence")
    script = shutil.which(request.config.getoption("--reference-script"))
    if script is None:
        pytest.skip(f"{request.config.getoption('--reference-script')} not found on this system")
    yield script
