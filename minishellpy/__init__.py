"""A small shell toolkit: tokenizing, quote removal, expansion, parsing and execution."""

__version__ = "0.1.0"
__all__ = [
    "builtins",
    "chars",
    "environment",
    "executor",
    "expand",
    "parser",
    "quotes",
    "shell",
    "tokenizer",
    "tokens",
]