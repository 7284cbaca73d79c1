import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from zohono.core.settings import CONFIG_ENV, ENV_KEYS


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in [CONFIG_ENV, *ENV_KEYS.values()]:
        monkeypatch.delenv(name, raising=False)
    yield
