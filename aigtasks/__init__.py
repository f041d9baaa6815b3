"""AIG circuit reading and reporting, a task load manager, and helpers."""

__version__ = "0.1.0"