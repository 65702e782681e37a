"""assistantkit: canonical conversion between AI coding-assistant configuration formats."""

__version__ = "0.1.0"
