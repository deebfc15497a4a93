"""PriceTick: per-glyph price ticker (tokenize + diff engine with a tkinter view)."""

__version__ = "1.0.0"
