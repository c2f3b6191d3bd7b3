"""Classic data structures: linked list, linked and array queues, vector and stack."""

__version__ = "0.1.0"