"""myls - an ls-like directory lister with type icons."""

__version__ = "0.1.0"
