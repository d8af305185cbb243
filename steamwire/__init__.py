"""Binary message formats, channel encryption, framed TCP and inventory helpers for Steam."""

__version__ = "0.1.0"