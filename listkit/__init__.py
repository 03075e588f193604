"""Array lists, linked lists, polynomials, simple sorts and student records."""

__version__ = "0.1.0"