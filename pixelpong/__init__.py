"""A two-player Pong game drawn pixel by pixel into a framebuffer and shown with pygame."""

__version__ = "0.1.0"