"""License text indexing package."""

from .classifier import Classifier
from .config import ClassifierConfig, TokenizerConfig

__all__ = ["Classifier", "ClassifierConfig", "TokenizerConfig"]
