import pytest

from pgnodefmt.lexer import TokenCursor, NodeSyntaxError
from pgnodefmt.printer import PrintState, visit_value, pretty_print, format_result


@pytest.mark.parametrize('source,expected', [
    ('42', '42'),
    ('  foo  ', 'foo'),
    ('"a  b"', '"a  b"'),
    ('<>', '<>'),
    ('4 [ 1 0 0 0 ]', '4 [ 1 0 0 0 ]'),
])
def test_scalars_are_verbatim(source, expected):
    assert pretty_print(source) == expected


def test_empty_node():
    assert pretty_print('{Foo}') == '{Foo}'


def test_node_attributes():
    assert pretty_print('{Foo :a 1 :b 2}') == '{Foo\n  :a 1\n  :b 2\n}'


def test_attribute_without_value():
    assert pretty_print('{Foo :a :b 1}') == '{Foo\n  :a \n  :b 1\n}'
    assert pretty_print('{Foo :a}') == '{Foo\n  :a \n}'


def test_tagged_array_on_one_line():
    assert pretty_print('(o 1 2 3)') == '(o 1 2 3)'
    assert pretty_print('(o)') == '(o)'


def test_bare_array_one_element_per_line():
    assert pretty_print('(1 2)') == '(\n  1\n  2\n)'


def test_empty_bare_array():
    assert pretty_print('()') == '()'


def test_nested():
    source = '{A :list ({B :x 1} {C}) :t (i 1 2)}'
    assert pretty_print(source) == (
        '{A\n'
        '  :list (\n'
        '    {B\n'
        '      :x 1\n'
        '    }\n'
        '    {C}\n'
        '  )\n'
        '  :t (i 1 2)\n'
        '}'
    )


def test_node_inside_tagged_array():
    assert pretty_print('(o {A :x 1})') == '(o {A\n    :x 1\n  })'


def test_constant_node():
    source = '{CONST :consttype 23 :constlen 4 :constvalue 4 [ 42 0 0 0 0 0 0 0 ] :location -1}'
    assert pretty_print(source) == (
        '{CONST\n'
        '  :consttype 23\n'
        '  :constlen 4\n'
        '  :constvalue 4 [ 42 0 0 0 0 0 0 0 ]\n'
        '  :location -1\n'
        '}'
    )


def test_input_layout_is_ignored():
    assert pretty_print('{Foo\n\n    :a\t1\r\n:b (\n)}\n') == '{Foo\n  :a 1\n  :b ()\n}'


def test_indent_size():
    assert pretty_print('{Foo :a (1)}', indent_size=4) == '{Foo\n    :a (\n        1\n    )\n}'


@pytest.mark.parametrize('start', [0, 3])
def test_depth_is_restored(start):
    state = PrintState(indent=start)
    visit_value(TokenCursor('{A :x (1 {B :y (o 2)}) :z {C}}'), state)
    assert state.indent == start


def test_write_new_on_empty_output():
    state = PrintState(indent=2)
    state.write_new('x')
    state.write_new('y')
    state.write('z')
    assert state.output == 'x\n    yz'


def test_deterministic():
    source = '{PLANNEDSTMT :planTree {SEQSCAN :targetlist ({TARGETENTRY :resno 1}) :qual <>} :rtable (o 1)}'
    assert pretty_print(source) == pretty_print(source)


@pytest.mark.parametrize('source,message,partial', [
    ('{Foo :a 1 2}', "Unexpected token 'atom' at 1:10: 2", '{Foo\n  :a 1'),
    ('(1 :a)', "Unexpected token 'key' at 1:3: :a", '(\n  1\n  '),
    ('{Foo :a 1', 'Unexpected end of input at 1:9', '{Foo\n  :a 1'),
    ('(1 2', 'Unexpected end of input at 1:4', '(\n  1\n  2\n  '),
    ('', 'Unexpected end of input at 1:0', ''),
    ('}', "Unexpected token 'nodeEnd' at 1:0: }", ''),
    ('{Foo :a 1 $}', "Unexpected character '$' at 1:10", '{Foo\n  :a '),
    ('1 2', "Unexpected token 'atom' at 1:2: 2 after end of value", '1'),
])
def test_errors_keep_partial_output(source, message, partial):
    with pytest.raises(NodeSyntaxError) as excinfo:
        pretty_print(source)
    assert str(excinfo.value) == message
    assert excinfo.value.partial_output == partial


def test_error_carries_token():
    with pytest.raises(NodeSyntaxError) as excinfo:
        pretty_print('{Foo :a 1 2}')
    assert excinfo.value.token.text == '2'


def test_format_result():
    assert format_result('{Foo}') == ('{Foo}', None)
    output, error = format_result('{Foo :a 1 2}')
    assert output == '{Foo\n  :a 1'
    assert isinstance(error, NodeSyntaxError)


def opexpr_chain(depth):
    source = '{CONST}'
    for _ in range(depth):
        source = '{OPEXPR :args (' + source + ' {CONST})}'
    return source


def test_moderately_deep_chain():
    output = pretty_print(opexpr_chain(20))
    assert output.startswith('{OPEXPR\n  :args (\n    {OPEXPR\n      :args (\n')
    assert output.endswith('\n  )\n}')


def test_nesting_too_deep_keeps_partial_output():
    output, error = format_result(opexpr_chain(1000))
    assert isinstance(error, NodeSyntaxError)
    assert str(error).startswith('Nesting too deep at 1:')
    assert error.token is not None
    assert output == error.partial_output
    assert output.startswith('{OPEXPR\n  :args (\n    {OPEXPR\n')
