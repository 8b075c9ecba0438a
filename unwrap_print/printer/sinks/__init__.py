from .console import ConsoleSink
from .inmemory import InMemorySink
from .logger import LoggerSink

__all__ = ["ConsoleSink", "InMemorySink", "LoggerSink"]
