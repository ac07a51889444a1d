"""helmmaker - scaffold Helm charts for sets of applications."""

__all__ = ["__version__"]
__version__ = "0.1.0"
