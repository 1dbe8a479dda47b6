from .reader import RuneReader
from .runebuffer import RuneBuffer
from .scanner import DrainError, Scanner, SinkWriteError
from .text import demojize, striplow, wordwrap


__all__ = [
    "DrainError",
    "RuneBuffer",
    "RuneReader",
    "Scanner",
    "SinkWriteError",
    "demojize",
    "striplow",
    "wordwrap",
]
