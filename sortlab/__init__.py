"""Array helpers, counted binary searches, record tasks, a phone directory and file exercises."""

__version__ = "0.1.0"