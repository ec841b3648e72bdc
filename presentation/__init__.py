"""Presentation layer - command line interface."""
from .cli import StatsCommand

__all__ = ['StatsCommand']
