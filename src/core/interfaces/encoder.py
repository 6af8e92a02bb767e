"""Contrato del codificador de metadatos."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import TokenMetadata


@runtime_checkable
class MetadataEncoder(Protocol):
    """Serializa `TokenMetadata` a un blob binario y de vuelta.

    Reglas de diseño:
    - `encode` no incluye selector de función: el blob es solo el argumento.
    - `decode(encode(m))` devuelve los mismos cuatro campos.
    """

    def encode(self, metadata: TokenMetadata) -> bytes:
        ...

    def decode(self, blob: bytes) -> TokenMetadata:
        ...
