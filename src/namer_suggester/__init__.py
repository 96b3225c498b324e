"""namer-suggester — better names for JavaScript/TypeScript identifiers."""

__version__ = "0.3.0"
