"""Signing, encoding, transport and response handling internals."""

__all__: list[str] = []
