"""CLI: tokenURI -> metadatos ABI-codificados para tests de Solidity.

Uso típico desde un test de Foundry vía FFI:

    tokenuri-abi "data:application/json;base64,eyJuYW1lIjoi..."

La salida es `0x` + hex sin salto de línea final; cualquier diagnóstico va a
stderr.
"""

from __future__ import annotations

import logging

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.abi_encoder import AbiMetadataEncoder, to_hex
from cli.logging_setup import configure_logging
from cli.ui_components import build_error_panel
from core.config import AppSettings
from core.errors import TokenMetadataError
from core.services.metadata_pipeline import encode_token_uri

app = typer.Typer(
    add_completion=False,
    help="Decode an on-chain tokenURI and print its ABI-encoded Metadata struct.",
)

_console = Console(stderr=True)

logger = logging.getLogger(__name__)


@app.command()
def encode(
    token_uri: str = typer.Argument(
        ...,
        metavar="TOKEN_URI",
        help="data:application/json;base64,... as returned by tokenURI().",
    ),
    lenient: bool = typer.Option(
        False,
        "--lenient",
        help="Pass values without the expected data-URI prefix straight to base64 decoding.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log each decoding stage to stderr.",
    ),
) -> None:
    """Print 0x + ABI encoding of (name, description, image, external_url), selector excluded."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        fields = ", ".join(
            "TOKENURI_ABI_" + ".".join(str(p) for p in err["loc"]).upper() for err in exc.errors()
        )
        raise typer.BadParameter(f"invalid configuration in {fields}") from exc

    configure_logging("DEBUG" if verbose else settings.log_level)
    strict = settings.strict_prefixes and not lenient

    try:
        blob = encode_token_uri(token_uri, encoder=AbiMetadataEncoder(), strict=strict)
    except TokenMetadataError as exc:
        logger.debug("Aborting: %s", exc)
        _console.print(build_error_panel(exc))
        raise typer.Exit(code=1) from exc

    typer.echo(to_hex(blob), nl=False)


def run() -> None:
    app()
