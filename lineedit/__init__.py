"""Line editing building blocks: grapheme-aware text buffer, word motion, undo history, clipboard."""

__version__ = "0.1.0"

__all__ = [
    "clipboard",
    "edit_stack",
    "line_buffer",
    "text",
    "words",
]