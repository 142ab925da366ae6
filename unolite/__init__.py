"""UNO Lite: a two-player UNO rules engine with agents and a CLI."""

__version__ = "0.1.0"
