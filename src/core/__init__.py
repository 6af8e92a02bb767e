"""Core: dominio, errores, config y pipeline (sin dependencias de CLI)."""
