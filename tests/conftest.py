from __future__ import annotations

from pathlib import Path

import pytest

FULL_OFFER = """\
OFFER: "Crypto Pro Max"
GEO: US, CA
TRAFFIC: Facebook, TikTok
PAYOUT: 42.5 USD
CR: 1.25%
CAP: 200
VERTICAL: Crypto
"""


@pytest.fixture
def write_offer(tmp_path: Path):
    """Write content to a fresh `.offer` file and return its path."""
    def _write(content: str, name: str = "test.offer", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding=encoding)
        return path
    return _write


@pytest.fixture
def full_offer() -> str:
    return FULL_OFFER
