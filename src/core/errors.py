"""Errores del pipeline de metadatos.

Cada etapa lanza una subclase concreta; la CLI las captura todas por la base
`TokenMetadataError` y las presenta en stderr.
"""

from __future__ import annotations


class TokenMetadataError(Exception):
    """Base de todos los fallos al procesar un tokenURI."""

    category = "error"


class DecodeError(TokenMetadataError):
    """Base64 inválido (JSON o SVG) o bytes que no son UTF-8."""

    category = "decode error"


class ParseError(TokenMetadataError):
    """El payload decodificado no es JSON válido."""

    category = "parse error"


class ShapeError(TokenMetadataError):
    """El JSON no tiene la forma de `TokenMetadata` o falta un prefijo data-URI."""

    category = "shape error"
