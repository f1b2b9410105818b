# tomlast

`tomlast` scans a TOML document and builds a small syntax tree for each
top-level expression. The expressions are tables, array tables and key/value
pairs, plus comments if you ask for them. Each node has a kind, the range of
raw bytes it covers and its decoded data. That makes the package a base for
linters, formatters and other tools that have to point at a place in the
source.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```python
from tomlast.parser import Parser

doc = b'''
hello = "world"
value = 42
'''

parser = Parser()
parser.reset(doc)
for expr in parser.expressions():
    print(expr.kind)                  # KeyValue
    key = next(iter(expr.key()))      # first part of the (possibly dotted) key
    value = expr.value()
    print(key.data, value.kind, value.data)
```

This prints:

```
KeyValue
b'hello' String b'world'
KeyValue
b'value' Integer b'42'
```

`Parser.reset` accepts `bytes`, `bytearray` or `str`. A `str` is encoded as
UTF-8. You can also call `next_expression()` yourself. It returns `True`
after each parsed expression, which you then read with `expression()`. It
returns `False` at the end of the document.

### Errors

A malformed document raises `ParserError` from `tomlast.errors`. Its
`message` describes the problem. Its `highlight` is a `Range` with an
`offset`, a `length` and an `end`, pointing at the offending bytes. Once an
error has been raised, `next_expression()` returns `False` until the next
`reset`.

### Node structure

Each `Node` (in `tomlast.ast`) has three attributes:

- `kind`: a `tomlast.kind.Kind`. Printing a kind gives its name, such as
  `KeyValue` or `LocalDateTime`.
- `raw`: a `Range`.
- `data`: the decoded bytes. For strings, escapes are already resolved.

How a node's children are read depends on its kind:

- `Array`: one child per element.
- `InlineTable`: one `KeyValue` child per entry.
- `KeyValue`: the first child is the value, and the rest are the parts of the key.
- `Table` and `ArrayTable`: the children are the parts of the key.

To walk the tree, use `node.children()`, `node.key()` and `node.value()`. To
step through it one node at a time, use `node.child()`, `node.next()` and
`node.is_last()`.

Numbers, booleans and dates are not converted. Their `data` holds the text
as written, for example `b"0xdead_beef"` or `b"2021-07-21T12:08:05Z"`. Dates
and times are sorted into `LocalDate`, `LocalTime`, `LocalDateTime` and
`DateTime`.

### Comments and positions

Pass `keep_comments=True` to keep comments as `Comment` nodes. A comment at
the end of a line is chained after the expression it follows. Inside
multi-line arrays, comments appear among the array's children.

`Parser.shape(node.raw)` gives the start and end `Position` of a node. A
`Position` holds the byte `offset`, the `line` and the `column`; line and
column both count from 1. `Parser.raw(rng)` returns the bytes a range
covers, and `Parser.range(start, end)` builds a range over the document.

```python
parser = Parser(keep_comments=True)
parser.reset(b"[table] # note\n")
for expr in parser.expressions():
    for key in expr.key():
        shape = parser.shape(key.raw)
        print(key.data, shape.start.line, shape.start.column)
```

### Lower-level pieces

- `tomlast.scanner` finds the end of single tokens: strings, comments, bare
  keys, whitespace and CRLF newlines. Each function takes the document and a
  starting offset.
- `tomlast.textvalues` decodes string tokens. For example,
  `parse_basic_string(data, pos)` returns the token's `Range`, the decoded
  bytes and the offset just past the token.
- `tomlast.builder.Builder` is the index-linked node store the parser uses
  for each expression.

### Custom decoding

`tomlast.ast` defines an `Unmarshaler` protocol. Give a type an
`unmarshal_toml(value)` method, and decoders built on this tree can hand it
the node that holds its value.

## What it does not do

`tomlast` only parses. It does not turn a document into dictionaries and
Python values. It does not check for duplicate keys or redefined tables. It
cannot write TOML back out. It has no command-line tool.