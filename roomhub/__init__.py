"""RoomHub backend: room listing API and development seed command."""

__version__ = "1.0.0"
