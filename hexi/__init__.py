"""Binary buffers, file buffers, endian conversion, varints and block allocation."""

__version__ = "1.0.0"