"""One-time pad encryption over a 27-character alphabet, with a key generator and TCP servers and clients."""

__version__ = "1.0.0"