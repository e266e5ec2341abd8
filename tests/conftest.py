import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


def pytest_configure(config):
    # Register the asyncio marker so pytest doesn't warn when it's used.
    config.addinivalue_line(
        "markers", "asyncio: mark test to run in an asyncio event loop"
    )
    # Add custom markers for test organization
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Isolate tests from acceptnorm settings in the environment.

    Clears variables that change negotiation behaviour so every test
    starts from the documented defaults.
    """
    for name in (
        "ACCEPTNORM_MAX_MEDIA_TYPES",
        "ACCEPTNORM_ACCEPT_STRATEGY",
        "ACCEPTNORM_PREFERRED_TYPES",
    ):
        monkeypatch.delenv(name, raising=False)

    monkeypatch.setenv("MCP_SERVER_NAME", "acceptnorm-test")
    monkeypatch.setenv("LOG_LEVEL", "INFO")

    yield


@pytest.fixture
def browser_accept():
    """A typical browser navigation Accept header."""
    return (
        "text/html,application/xhtml+xml,application/xml;q=0.9,"
        "image/avif,image/webp,*/*;q=0.8"
    )
