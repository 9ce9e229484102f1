import sys
from pathlib import Path

import pytest

# Ensure `import streamtoken...` works when running pytest from repo root.
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

DEMO_SECRET = "demosecret123abc"
DEMO_STREAM_ID = "YourStreamId"
# Clock reading behind the documented lifetime example (exp=1579792240, lifetime=3600).
DEMO_NOW = 1579788640


@pytest.fixture(autouse=True)
def _no_configured_secret(monkeypatch):
    from streamtoken.core.config import settings
    from streamtoken.observability import configure_logging

    monkeypatch.delenv("HDNTS_SECRET", raising=False)
    settings.reload()
    yield
    monkeypatch.delenv("HDNTS_SECRET", raising=False)
    settings.reload()
    configure_logging("WARNING")
