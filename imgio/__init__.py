"""Image input sources and output targets for in-memory, file and writer-based I/O."""

__version__ = "0.1.0"
__all__ = ["source", "target"]