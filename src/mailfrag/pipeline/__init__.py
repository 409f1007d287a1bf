"""Pipeline components for email fragment parsing."""

from mailfrag.pipeline.classifier import ClassifiedLine, LineClassifier
from mailfrag.pipeline.normalizer import NormalizedBody, Normalizer
from mailfrag.pipeline.scanner import Fragment, FragmentScanner

__all__ = [
    "ClassifiedLine",
    "Fragment",
    "FragmentScanner",
    "LineClassifier",
    "NormalizedBody",
    "Normalizer",
]
