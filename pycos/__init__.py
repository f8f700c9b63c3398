"""Character classes, a scanner, containers, diagnostics and stream decoders for COS (PDF) data."""

__version__ = "0.1.0"