"""Content site backend for the Nami Minecraft server."""

__version__ = "0.1.0"
