"""Core of a PCB boardview viewer: search, spelling suggestions, settings, colour themes, key bindings, background images and PDF viewer commands."""

__version__ = "0.1.0"