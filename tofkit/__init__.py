"""Status codes, error-code lookups, frame and sensor descriptions, metadata decoding and parameter parsing for time-of-flight depth cameras."""

__version__ = "0.1.0"