"""Data Comptroller: collect messages over TCP and write them to output files."""

__version__ = "1.0"
__all__ = ["__version__"]