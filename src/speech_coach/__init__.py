"""Speech confidence coaching backend for a voice-recording app."""

__version__ = "0.1.0"
