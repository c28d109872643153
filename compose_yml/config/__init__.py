"""Decoding helpers, merge/interpolate algebras, validation and file loading."""
