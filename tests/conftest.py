"""Fixtures compartidas: tokenURIs construidos como los emite el contrato."""

from __future__ import annotations

import base64
import json
from collections.abc import Callable
from pathlib import Path

import pytest

from core.domain.models import TokenMetadata
from core.services.metadata_pipeline import build_token_uri


def _b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Sin `.env` del proyecto ni variables TOKENURI_ABI_* del entorno."""

    monkeypatch.chdir(tmp_path)
    for key in ("TOKENURI_ABI_STRICT_PREFIXES", "TOKENURI_ABI_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def sample_metadata() -> TokenMetadata:
    return TokenMetadata(
        name="N",
        description="D",
        image="<svg/>",
        external_url="U",
    )


@pytest.fixture
def sample_token_uri(sample_metadata: TokenMetadata) -> str:
    return build_token_uri(sample_metadata)


@pytest.fixture
def make_token_uri() -> Callable[[object], str]:
    """Envuelve un payload JSON arbitrario (o texto crudo) en el data URI."""

    def _make(payload: object) -> str:
        text = payload if isinstance(payload, str) else json.dumps(payload)
        return "data:application/json;base64," + _b64(text)

    return _make


@pytest.fixture
def svg_data_uri() -> Callable[[str], str]:
    def _make(svg: str) -> str:
        return "data:image/svg+xml;base64," + _b64(svg)

    return _make


def word(value: int) -> str:
    """Palabra ABI de 32 bytes en hex."""

    return f"{value:064x}"


def padded_string(text: str) -> str:
    """Longitud + bytes UTF-8 rellenados a múltiplos de 32."""

    raw = text.encode("utf-8").hex()
    padding = (-len(raw)) % 64
    return word(len(text.encode("utf-8"))) + raw + "0" * padding


@pytest.fixture
def expected_sample_hex() -> str:
    """Codificación de ("N", "D", "<svg/>", "U") calculada a mano."""

    tail = "".join(padded_string(s) for s in ("N", "D", "<svg/>", "U"))
    heads = word(0x80) + word(0xC0) + word(0x100) + word(0x140)
    return "0x" + word(0x20) + heads + tail
