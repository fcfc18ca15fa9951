"""Console tools: an in-memory interactive phonebook, a case converter and a car demo."""

__version__ = "0.1.0"