"""fetch-items: descarga, agrupa y muestra la lista de items por List ID."""

__version__ = "0.1.0"
