# Copyright 2025 Michael Homer. See LICENSE for details.
from .lexer import NodeSyntaxError, TokenCursor, tokenise
from .printer import pretty_print, format_result

__version__ = '0.1.0'

__all__ = ['pretty_print', 'format_result', 'tokenise', 'TokenCursor', 'NodeSyntaxError']
