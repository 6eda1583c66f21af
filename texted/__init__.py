"""Headless text editor core: a buffer with point and mark and Emacs-style functions on it."""

__version__ = "0.1.0"