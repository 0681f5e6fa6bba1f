"""Thread-based task running with bounded concurrency, exception collection and open-file limit raising."""

__version__ = "0.1.0"
__all__ = ["fdlimit", "manager", "shared"]