"""A TinyLFU cache, frequency sketches, a linked list, background futures, command palette filtering, scrollbar geometry and control state for trace viewers."""

__version__ = "0.1.0"