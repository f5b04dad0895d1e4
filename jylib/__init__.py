"""Service helpers: ciphers, coded errors, tokens, password hashing, ids, geo coordinates and API clients."""

__version__ = "0.1.0"