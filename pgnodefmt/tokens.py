# Copyright 2025 Michael Homer. See LICENSE for details.
from dataclasses import dataclass
from typing import ClassVar


@dataclass
class Token:
    "A token in a node dump, with its verbatim source text."
    line : int
    column : int
    text : str
    kind : ClassVar[str] = 'token'


class ValueToken(Token):
    "A scalar that is rendered exactly as written."
    pass


@dataclass
class NodeStartToken(Token):
    kind : ClassVar[str] = 'nodeStart'


@dataclass
class NodeEndToken(Token):
    kind : ClassVar[str] = 'nodeEnd'


@dataclass
class ArrayStartToken(Token):
    kind : ClassVar[str] = 'arrayStart'

    @property
    def tag(self) -> str:
        """
        The letter following the opening paren, or '' for a bare paren.

        A tagged array is laid out on a single line.
        """
        return self.text[1:]


@dataclass
class ArrayEndToken(Token):
    kind : ClassVar[str] = 'arrayEnd'


@dataclass
class KeyToken(Token):
    kind : ClassVar[str] = 'key'


@dataclass
class StringToken(ValueToken):
    kind : ClassVar[str] = 'string'


@dataclass
class AtomToken(ValueToken):
    kind : ClassVar[str] = 'atom'


@dataclass
class EndToken(Token):
    "Sentinel produced once the input is exhausted."
    kind : ClassVar[str] = 'end of input'
