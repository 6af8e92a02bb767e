"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- El pipeline depende del contrato, no de `eth-abi`.
"""

from core.interfaces.encoder import MetadataEncoder

__all__ = ["MetadataEncoder"]
