"""Terminal chat client components: inline markdown, text editing, command history and lists."""

__version__ = "0.1.0"