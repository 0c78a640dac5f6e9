"""Models, PieFed client, converters and routing for a Lemmy API layer over PieFed."""

__version__ = "0.1.0"