import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

BASE = "https://api.wistia.com/v1"


@pytest.fixture(autouse=True)
def _aws_dummy_env(monkeypatch):
    # Safe defaults for tests; never talk to a real AWS account
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "test")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "test")
    monkeypatch.delenv("WISTIA_SECRET_ARN", raising=False)
    monkeypatch.delenv("WISTIA_API_TOKEN", raising=False)
    monkeypatch.delenv("WISTIA_BASE_URL", raising=False)


@pytest.fixture
def account():
    from wistia_api.account import Account

    return Account("fake", data={"id": 1, "name": "Acme", "url": "https://acme.wistia.com"})
