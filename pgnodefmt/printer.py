# Copyright 2025 Michael Homer. See LICENSE for details.
import logging
from dataclasses import dataclass

from .lexer import TokenCursor, NodeSyntaxError, describe_token
from .tokens import *

logger = logging.getLogger(__name__)

# Columns added per level of nesting.
INDENT_SIZE = 2


@dataclass
class PrintState:
    """
    Output accumulated so far, and the nesting depth that new lines are indented to.
    """
    output : str = ''
    indent : int = 0
    indent_size : int = INDENT_SIZE

    def write(self, value: str):
        "Append to the current line."
        self.output += value

    def write_new(self, value: str):
        """
        Start a new line at the current indentation and write value on it.

        Nothing is written before the first line of output.
        """
        if self.output:
            self.output += '\n' + ' ' * (self.indent * self.indent_size)
        self.output += value


def unexpected(token: Token) -> NodeSyntaxError:
    return NodeSyntaxError(f"Unexpected {describe_token(token)}", token)


def visit_value(tokens: TokenCursor, state: PrintState):
    """
    Render the node, array, atom or string starting at the current token.
    """
    token = tokens.peek()
    match token:
        case NodeStartToken():
            visit_node(tokens, state)
        case ArrayStartToken():
            visit_array(tokens, state)
        case ValueToken():
            tokens.next()
            state.write(token.text)
        case _:
            raise unexpected(token)


def visit_node(tokens: TokenCursor, state: PrintState):
    """
    Render a `{Type :key value ...}` record with one attribute per line.

    A node without attributes stays on one line.
    """
    token = tokens.next(NodeStartToken)
    state.write(token.text)
    state.indent += 1

    token = tokens.next()
    props = 0
    while not isinstance(token, NodeEndToken):
        if not isinstance(token, KeyToken):
            raise unexpected(token)
        state.write_new(token.text + ' ')
        # An AttrNumber list may have no elements at all, leaving the key bare.
        if not isinstance(tokens.peek(), (KeyToken, NodeEndToken)):
            visit_value(tokens, state)
        props += 1
        token = tokens.next()

    state.indent -= 1
    if props > 0:
        state.write_new('}')
    else:
        state.write('}')


def visit_array(tokens: TokenCursor, state: PrintState):
    """
    Render a parenthesised list. A bare `(` puts each element on its own
    line; a tagged one such as `(o` keeps all elements on one line.
    """
    token = tokens.next(ArrayStartToken)
    state.write(token.text)
    state.indent += 1

    one_line = token.tag != ''
    elements = 0
    while not isinstance(tokens.peek(), ArrayEndToken):
        if one_line:
            state.write(' ')
        else:
            state.write_new('')
        visit_value(tokens, state)
        elements += 1

    tokens.next(ArrayEndToken)
    state.indent -= 1
    if elements > 0 and not one_line:
        state.write_new(')')
    else:
        state.write(')')


def pretty_print(source: str, indent_size: int = INDENT_SIZE) -> str:
    """
    Reformat a node dump into an indented layout.

    :param source: The complete text of one dump.
    :param indent_size: Columns of indentation per level of nesting.
    :return: The rendered text, without a trailing newline.
    :raises NodeSyntaxError: If the source cannot be tokenised or does not
        follow the dump grammar, or nests deeper than the interpreter's
        recursion limit allows. The text rendered up to that point is in
        the exception's `partial_output`.
    """
    state = PrintState(indent_size=indent_size)
    logger.debug("Formatting %d characters", len(source))
    try:
        tokens = TokenCursor(source)
        visit_value(tokens, state)
        trailing = tokens.peek()
        if not isinstance(trailing, EndToken):
            raise NodeSyntaxError(f"Unexpected {describe_token(trailing)} after end of value", trailing)
    except RecursionError:
        token = tokens.peek()
        err = NodeSyntaxError(f"Nesting too deep at {token.line}:{token.column}", token)
        err.partial_output = state.output
        logger.debug("Stopped after %d characters of output: %s", len(state.output), err)
        raise err from None
    except NodeSyntaxError as err:
        err.partial_output = state.output
        logger.debug("Stopped after %d characters of output: %s", len(state.output), err)
        raise
    logger.debug("Produced %d characters of output", len(state.output))
    return state.output


def format_result(source: str, indent_size: int = INDENT_SIZE) -> tuple[str, NodeSyntaxError | None]:
    """
    Like pretty_print, but return (output, error) instead of raising.
    `output` is the partial rendering when `error` is not None.
    """
    try:
        return pretty_print(source, indent_size), None
    except NodeSyntaxError as err:
        return err.partial_output, err
