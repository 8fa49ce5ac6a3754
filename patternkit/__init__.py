"""Runnable demonstrations of six classic object-oriented design patterns."""

__version__ = "0.1.0"

__all__ = [
    "strategy",
    "observer",
    "decorator",
    "simple_factory",
    "factory_method",
    "abstract_factory",
]