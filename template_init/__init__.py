"""Interactive initialization of a freshly copied test-automation template."""

__version__ = "0.1.0"
