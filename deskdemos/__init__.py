"""Small desktop programs: a hello window, an alarm clock, a contacts list and a CSV-backed address book."""

__version__ = "0.4.0"