"""stackguide - project stack detection and guideline composition."""

__version__ = "0.1.0"
