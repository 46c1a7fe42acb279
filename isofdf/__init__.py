"""Height-map parsing, XPM decoding, colours, pixel images and event hooks for wireframe drawing."""

__version__ = "0.1.0"
__all__ = ["colors", "wordtab", "visual", "image", "xpm", "events", "fdfmap"]