"""Modelos del dominio (Pydantic v2).

`TokenMetadata` es el JSON que devuelve `tokenURI`. El orden de los campos
coincide con el struct `Metadata` de los tests en Solidity, porque la
codificación ABI es posicional.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class TokenMetadata(BaseModel):
    """Metadatos de un token NFT (name, description, image, external_url)."""

    model_config = ConfigDict(strict=True, extra="ignore")

    name: str = Field(
        ...,
        description="Nombre del token.",
    )
    description: str = Field(
        ...,
        description="Descripción del token.",
    )
    image: str = Field(
        ...,
        description="Data URI del SVG o, tras decodificar, el texto SVG.",
    )
    external_url: str = Field(
        ...,
        description="URL externa asociada al token.",
    )

    def as_abi_tuple(self) -> tuple[str, str, str, str]:
        """Valores en el orden del tuple `(string,string,string,string)`."""

        return (self.name, self.description, self.image, self.external_url)
