"""dualtodo - daily and long-term todo lists edited in the terminal."""

__version__ = "0.1.0"
