"""
library_api

API REST de autores y libros. Un autor puede tener varios libros y cada
libro pertenece exactamente a un autor.
"""

__version__ = "1.0.0"
