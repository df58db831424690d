"""Renderers for colored token streams."""

from tintcat.renderers.terminal import TerminalRenderer

__all__ = ["TerminalRenderer"]
