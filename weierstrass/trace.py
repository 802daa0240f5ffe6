"""
Diagnostic trace for the point arithmetic.

The arithmetic reports intermediate values to a tracer instead of printing
them. The default tracer discards everything.
"""

import sys


class Tracer:
    """Tracer that ignores every value."""

    def trace(self, name, value):
        pass


class PrintTracer(Tracer):
    """Print each value as a "Debug: name = value" line."""

    def __init__(self, stream=None):
        self.stream = stream

    def trace(self, name, value):
        stream = self.stream if self.stream is not None else sys.stdout
        print(f"Debug: {name} = {value}", file=stream)


class RecordingTracer(Tracer):
    """Keep the traced (name, value) pairs in order."""

    def __init__(self):
        self.records = []

    def trace(self, name, value):
        self.records.append((name, value))

    def values(self, name):
        return [value for traced, value in self.records if traced == name]


NULL_TRACER = Tracer()
