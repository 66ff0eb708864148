"""Dependency injection module."""
from .dependencies import Container, container

__all__ = ["container", "Container"]
