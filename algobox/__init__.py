"""Classic small algorithms: sorting, searching, number theory, arithmetic, matrices, strings, graphs and files."""

__version__ = "0.1.0"