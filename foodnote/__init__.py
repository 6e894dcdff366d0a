"""Console notebook for food recipes stored in a CSV file."""

__version__ = "0.1.0"
__all__ = ["__version__"]