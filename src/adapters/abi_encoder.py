"""Codificación ABI de `TokenMetadata` con eth-abi.

Equivale a `encodeFunctionData("x", [metadata])` de ethers sin los 4 bytes
del selector: el tuple dinámico se codifica como único argumento, así que el
blob empieza con el offset `0x20` hacia el tuple.
"""

from __future__ import annotations

from eth_abi import decode as abi_decode
from eth_abi import encode as abi_encode
from eth_abi.exceptions import DecodingError

from core.domain.models import TokenMetadata
from core.errors import DecodeError, ShapeError

# Debe coincidir con el orden del struct `Metadata` en los tests de Solidity.
METADATA_TUPLE_TYPE = "(string,string,string,string)"


class AbiMetadataEncoder:
    """Implementa `MetadataEncoder` para el tuple fijo de metadatos."""

    tuple_type = METADATA_TUPLE_TYPE

    def encode(self, metadata: TokenMetadata) -> bytes:
        try:
            return abi_encode([self.tuple_type], [metadata.as_abi_tuple()])
        except UnicodeEncodeError as exc:
            # p.ej. surrogates sueltos ("\ud800") que JSON admite y UTF-8 no
            raise ShapeError(f"Token metadata is not encodable as UTF-8: {exc}") from exc

    def decode(self, blob: bytes) -> TokenMetadata:
        try:
            (values,) = abi_decode([self.tuple_type], blob)
        except (DecodingError, UnicodeDecodeError) as exc:
            raise DecodeError(f"Invalid ABI blob for {self.tuple_type}: {exc}") from exc

        name, description, image, external_url = values
        return TokenMetadata(
            name=name,
            description=description,
            image=image,
            external_url=external_url,
        )


def to_hex(blob: bytes) -> str:
    """`0x` + hex en minúsculas."""

    return "0x" + blob.hex()


def from_hex(value: str) -> bytes:
    """Inverso de `to_hex`; acepta el prefijo `0x` opcional."""

    text = value[2:] if value[:2].lower() == "0x" else value
    try:
        return bytes.fromhex(text)
    except ValueError as exc:
        raise DecodeError(f"Invalid hex string: {exc}") from exc
