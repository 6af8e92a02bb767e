"""Servicios que orquestan el dominio."""
