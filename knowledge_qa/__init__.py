"""Upload text documents and answer questions about them with a hosted language model."""

__version__ = "1.0.0"
