"""Core decoding and verification — pure functions over byte streams."""
