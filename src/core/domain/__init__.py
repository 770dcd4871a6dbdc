"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras e inmutables (descriptor, outcome, errores).
- El dominio no hace I/O: describe *qué* se envía, no *cómo*.
"""
