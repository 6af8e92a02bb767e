"""Helpers para data URIs en base64.

Solo se soportan los dos prefijos fijos que emite el contrato:
`data:application/json;base64,` y `data:image/svg+xml;base64,`.
"""

from __future__ import annotations

import base64
import binascii

from core.errors import DecodeError, ShapeError

JSON_DATA_URI_PREFIX = "data:application/json;base64,"
SVG_DATA_URI_PREFIX = "data:image/svg+xml;base64,"


def strip_prefix(value: str, prefix: str, *, strict: bool = True) -> str:
    """Quita `prefix` solo si aparece exactamente al inicio de `value`.

    En modo estricto, un prefijo ausente es un `ShapeError`. En modo laxo la
    cadena se devuelve sin cambios y la decodificación posterior decide.
    """

    if value.startswith(prefix):
        return value[len(prefix):]
    if strict:
        preview = value[:32] + ("..." if len(value) > 32 else "")
        raise ShapeError(f"Expected a value starting with {prefix!r}, got {preview!r}")
    return value


def decode_base64_text(payload: str) -> str:
    """Decodifica base64 (alfabeto validado) a texto UTF-8."""

    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(f"Invalid base64 payload: {exc}") from exc

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"Decoded payload is not UTF-8 text: {exc}") from exc


def encode_data_uri(text: str, prefix: str) -> str:
    """Inverso de `strip_prefix` + `decode_base64_text`."""

    return prefix + base64.b64encode(text.encode("utf-8")).decode("ascii")
