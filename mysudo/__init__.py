"""A minimal sudo-like tool: shadow-file password checks and running commands as root."""

__version__ = "0.1.0"