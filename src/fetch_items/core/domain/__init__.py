"""Modelos y entidades del dominio.

Por qué:
- `Item`, `FetchState`, la paleta y los errores viven aquí, sin I/O.
- El dominio no conoce HTTP ni la CLI: solo conceptos del problema.
"""
