"""Pipeline tokenURI -> blob ABI.

Etapas (sin recuperación local; cualquier error se propaga):
1. quitar `data:application/json;base64,` y decodificar base64
2. parsear JSON y validar la forma `TokenMetadata`
3. quitar `data:image/svg+xml;base64,` de `image` y decodificar el SVG
4. codificar el tuple con el `MetadataEncoder` recibido
"""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from core.data_uri import (
    JSON_DATA_URI_PREFIX,
    SVG_DATA_URI_PREFIX,
    decode_base64_text,
    encode_data_uri,
    strip_prefix,
)
from core.domain.models import TokenMetadata
from core.errors import ParseError, ShapeError
from core.interfaces import MetadataEncoder

logger = logging.getLogger(__name__)


def _parse_metadata(text: str) -> TokenMetadata:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Token metadata is not valid JSON: {exc}") from exc
    except RecursionError as exc:
        raise ParseError("Token metadata JSON is nested too deeply") from exc

    if not isinstance(payload, dict):
        raise ShapeError(f"Token metadata must be a JSON object, got {type(payload).__name__}")
    if "image" not in payload:
        raise ShapeError("Token metadata has no 'image' field")

    try:
        return TokenMetadata.model_validate(payload)
    except ValidationError as exc:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
        raise ShapeError(f"Token metadata has missing or non-string fields: {fields}") from exc


def decode_token_uri(token_uri: str, *, strict: bool = True) -> TokenMetadata:
    """Decodifica un tokenURI on-chain; `image` queda como texto SVG."""

    payload = strip_prefix(token_uri, JSON_DATA_URI_PREFIX, strict=strict)
    text = decode_base64_text(payload)
    logger.debug("Decoded metadata JSON (%d chars)", len(text))

    metadata = _parse_metadata(text)

    svg_payload = strip_prefix(metadata.image, SVG_DATA_URI_PREFIX, strict=strict)
    svg = decode_base64_text(svg_payload)
    logger.debug("Decoded SVG image (%d chars)", len(svg))

    return metadata.model_copy(update={"image": svg})


def build_token_uri(metadata: TokenMetadata) -> str:
    """Construye el tokenURI que emitiría el contrato para `metadata`.

    `metadata.image` debe ser el texto SVG, no un data URI.
    """

    payload = metadata.model_dump(mode="json")
    payload["image"] = encode_data_uri(metadata.image, SVG_DATA_URI_PREFIX)
    return encode_data_uri(json.dumps(payload, ensure_ascii=False), JSON_DATA_URI_PREFIX)


def encode_token_uri(
    token_uri: str,
    *,
    encoder: MetadataEncoder,
    strict: bool = True,
) -> bytes:
    """tokenURI -> blob ABI (sin selector)."""

    metadata = decode_token_uri(token_uri, strict=strict)
    blob = encoder.encode(metadata)
    logger.debug("ABI-encoded metadata (%d bytes)", len(blob))
    return blob
