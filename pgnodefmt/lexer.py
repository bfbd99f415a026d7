# Copyright 2025 Michael Homer. See LICENSE for details.
import re
from dataclasses import dataclass, field

from .tokens import *

# Alternatives are tried in order and the first one to match wins.
# The bracketed part of the atom rule folds constant byte lists such as
# `4 [ 1 0 0 0 ]` into the preceding atom. Each number in the list can only
# be matched one way.
_space = r'[ \t\r\n]'
token_pattern = re.compile(
    rf'(?P<whitespace>{_space}+)'
    r'|(?P<string>"(?:\\["\\]|[^\n"\\])*")'
    r'|(?P<key>:[A-Za-z0-9_]+)'
    r'|(?P<nodeStart>\{[A-Za-z0-9_]+)'
    r'|(?P<nodeEnd>\})'
    r'|(?P<arrayStart>\([a-z]?)'
    r'|(?P<arrayEnd>\))'
    rf'|(?P<atom>(?:[A-Za-z0-9_<>.?\-]+|{_space}*\[(?:{_space}*-?[0-9]+(?:\.[0-9]*)?(?![0-9.]))*{_space}*\])+)'
)

token_classes: dict[str, type[Token]] = {
    'string': StringToken,
    'key': KeyToken,
    'nodeStart': NodeStartToken,
    'nodeEnd': NodeEndToken,
    'arrayStart': ArrayStartToken,
    'arrayEnd': ArrayEndToken,
    'atom': AtomToken,
}


class NodeSyntaxError(Exception):
    """
    Represents a syntax error encountered while tokenising or printing a node dump.

    `token` is the offending token, if there was one. `partial_output` holds
    whatever had been rendered before the error was raised.
    """
    def __init__(self, message: str, token: Token | None = None):
        super().__init__(message)
        self.token = token
        self.partial_output = ''


def describe_token(token: Token) -> str:
    "Describe a token for an error message, including its position."
    if isinstance(token, EndToken):
        return f"end of input at {token.line}:{token.column}"
    return f"token '{token.kind}' at {token.line}:{token.column}: {token.text}"


@dataclass
class TokenCursor:
    """
    Lookahead-1 view over the tokens of a source string.

    Holds the current token and the index of the remaining input. Tokens are
    scanned only as the cursor advances, so text that cannot be tokenised is
    reported when the cursor reaches it rather than up front.
    """
    source : str
    index : int = 0
    line : int = 1
    line_start : int = 0
    current : Token = field(init=False)

    def __post_init__(self):
        self.current = self._read_next()

    def _read_next(self) -> Token:
        while self.index < len(self.source):
            column = self.index - self.line_start
            match = token_pattern.match(self.source, self.index)
            if not match:
                raise NodeSyntaxError(f"Unexpected character {self.source[self.index]!r} at {self.line}:{column}")
            line = self.line
            text = match.group()
            if (newlines := text.count('\n')):
                self.line += newlines
                self.line_start = match.start() + text.rindex('\n') + 1
            self.index = match.end()
            if match.lastgroup == 'whitespace':
                continue
            return token_classes[match.lastgroup](line, column, text)
        return EndToken(self.line, self.index - self.line_start, '')

    def peek(self) -> Token:
        """
        Return the current token without consuming it.

        Once the input is exhausted this is an EndToken.
        """
        return self.current

    def next(self, expected: type[Token] | None = None) -> Token:
        """
        Consume and return the current token, advancing to the following one.

        If `expected` is given and the current token is not of that type, raises
        NodeSyntaxError and leaves the cursor where it was.
        """
        token = self.current
        if expected is not None and not isinstance(token, expected):
            raise NodeSyntaxError(f"Expected '{expected.kind}', got {describe_token(token)}", token)
        if not isinstance(token, EndToken):
            self.current = self._read_next()
        return token


def tokenise(source: str) -> list[Token]:
    """
    Produce a list of tokens.Token from a string, without the end-of-input sentinel.

    Will raise NodeSyntaxError if the source contains text that matches no token.
    """
    cursor = TokenCursor(source)
    tokens = []
    while not isinstance(cursor.peek(), EndToken):
        tokens.append(cursor.next())
    return tokens
