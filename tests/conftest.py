"""
Test bootstrap:
- Make src/ and the tests/ helpers importable at collect-time
- Provide a transport wired to a fake session
"""
import sys
import pathlib
import pytest

TESTS = pathlib.Path(__file__).parent.resolve()
SRC = TESTS.parent / "src"

for path in (SRC, TESTS):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from helpers import FakeSession  # noqa: E402
from starr_client.api_client import ClientConfig, StarrClient  # noqa: E402


@pytest.fixture
def fake_session():
    """A session that replays queued responses and records every request."""
    return FakeSession()


@pytest.fixture
def api(fake_session):
    """A transport pointed at a fake server."""
    config = ClientConfig(url="http://starr.test:8989/", api_key="secret")
    return StarrClient(config, session=fake_session)
