"""Text, memory and number helpers with classic C-library semantics."""

__version__ = "0.1.0"
__all__ = ["chars", "numbers", "memory", "strings", "output", "printf", "line_reader"]