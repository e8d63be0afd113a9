"""Legal destination squares for a lone pawn, king or queen."""

__version__ = "1.0.0"
