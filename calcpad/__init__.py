"""A keypad calculator: a calculation engine and a Tk window that drives it."""

__version__ = "1.0.0"
__all__ = ["calculator", "gui"]