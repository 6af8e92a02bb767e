"""Capa de presentación: comandos Typer y salida Rich."""
