"""Mathematical primitives shared by the classifiers."""

from .entropy import Entropy

__all__ = ["Entropy"]
