"""SlotSync - doctor and appointment slot synchronization."""

__version__ = "0.1.0"
