"""Identify compilers, languages, libraries, operating systems, platforms and architectures from predefined preprocessor macros."""

__version__ = "1.15.1"
__all__ = [
    "architecture",
    "bsd",
    "compiler",
    "compiler_legacy",
    "detection",
    "language",
    "libc",
    "library",
    "machine",
    "make",
    "os",
    "platform",
    "version_number",
]