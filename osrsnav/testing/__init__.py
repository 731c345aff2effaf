# osrsnav/testing/__init__.py
"""Fakes for exercising osrsnav without a live game or nav service."""

from .fakes import FakeGame

__all__ = ["FakeGame"]
