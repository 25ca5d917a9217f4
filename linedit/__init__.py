"""Line editing building blocks: segmentation, motions, text buffer, undo history and clipboard."""

__version__ = "0.1.0"

__all__ = [
    "clipboard",
    "edit_stack",
    "line_buffer",
    "motions",
    "segmentation",
]