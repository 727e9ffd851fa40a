"""playbill — billing statements for theatrical performances."""

__version__ = "0.1.0"
