"""Directive file tokenizer and token dispenser."""

from pathcors.directives.dispenser import Dispenser
from pathcors.directives.lexer import Token, tokenize

__all__ = ["Dispenser", "Token", "tokenize"]
