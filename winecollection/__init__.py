"""Wine Collection - wine maker and wine bottle catalogue API."""

__version__ = "0.1.0"
