"""Internal constants shared across the library."""

# Base-62 alphabet: digits, then uppercase, then lowercase.
ID_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
ID_LENGTH = 64

ENV_ID_LENGTH = "PYKEYDB_ID_LENGTH"
ENV_SEED = "PYKEYDB_SEED"
