"""Vector search building blocks: metric names, range-result filtering, bitsets, normalisation, LRU cache, index registry, settings, recall evaluation and benchmark data set names."""

__version__ = "0.1.0"