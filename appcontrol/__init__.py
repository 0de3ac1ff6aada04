"""Voice-controlled media list: trigger detection and list state."""

from appcontrol.__version__ import __version__

__all__ = ["__version__"]
