"""coursectl — course/category persistence with a clean entity/repository split."""

__version__ = "0.1.0"
