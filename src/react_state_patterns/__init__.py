"""Static analysis of React component state-management patterns."""

__version__ = "0.1.0"
