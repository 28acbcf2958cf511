"""U2F security key building blocks: constants, HID descriptor parsing, devices and helpers."""

__version__ = "0.1.0"