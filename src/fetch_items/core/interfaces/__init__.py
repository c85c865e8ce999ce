"""Interfaces/abstracciones del Core.

Por qué:
- `HttpTransport` y `Decoder` son los dos puntos de inyección del cliente.
- Los tests sustituyen la red sin subclases ni overrides.
"""
