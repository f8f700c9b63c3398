# pycos

`pycos` provides low-level pieces for reading Carousel Object System data. This is the
object layer that PDF files are built on. The package needs only the standard library.

## What is in the package

- `pycos.charset`: the `CharacterSet` enum of named code points. It also has the tests
  `is_whitespace`, `is_delimiter`, `is_end_of_line`, `is_hex_digit`, `is_octal_digit` and
  `is_decimal_digit`. Each test accepts an int, or a one-character `str` or `bytes`.
- `pycos.scanner`: `Scanner`, a cursor over a byte buffer. Its methods are `read_char`,
  `match_char`, `read_unsigned(max_digits)`, `skip_whitespace`, `reset` and `set_input`.
  It also exposes the `position` and `at_end` properties.
- `pycos.utils`: `fls`, `next_pow2` and `round_capacity`, which the containers use to
  size themselves.
- Containers:
  - `pycos.array.ItemArray`: an ordered array with optional `retain` and `release`
    callbacks.
  - `pycos.data.ByteData`: a growable byte buffer with `append`, `push_back`, `get_range`,
    `reserve`, `reset` and `copy`.
  - `pycos.hashmap.HashMap`: a linear-probing map with optional hash and equality
    functions and key/value ownership hooks.
  - `pycos.ring_buffer.RingBuffer`: a double-ended queue. Its methods are `push_front`,
    `push_back`, `pop_front`, `pop_back`, `first` and `last`.
  - `pycos.textbuffer.TextBuffer`: a growable string that tracks a capacity. The module
    also has `fnv1a_64` and `string_ref_compare`, which orders by length first.
- `pycos.diagnostics`: `LogContext` with `LogLevel` filtering, and
  `DiagnosticHandler` with `Diagnostic` / `DiagnosticType`. It also has
  `default_log_context()`, `default_diagnostic_handler()` and
  `logger_diagnostic_handler(log_context)`.
- `pycos.document`: `Document`, which holds a version, a root object and an optional
  diagnostic handler.
- Stream decoders. All are built on `pycos.filter.Filter`, a read-only `io.RawIOBase` that
  reads from an attached source. Closing a filter also closes its source.
  - `pycos.ascii85.ASCII85Decoder` and `decode_ascii85_block`.
  - `pycos.asciihex.ASCIIHexDecoder` and `hex_digit_value`.
  - `pycos.runlength.RunLengthDecoder`.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install .[test]
```

## Examples

Decode ASCII hexadecimal data:

```python
import io
from pycos.asciihex import ASCIIHexDecoder

decoder = ASCIIHexDecoder(io.BytesIO(b"48 65 6c6c 6f>"))
print(decoder.read())   # b'Hello'
```

Decode run-length data:

```python
import io
from pycos.runlength import RunLengthDecoder

decoder = RunLengthDecoder(io.BytesIO(b"\x02abc\xfeZ\x80"))
print(decoder.read())   # b'abcZZZ'
```

Decode a single base-85 block:

```python
from pycos.ascii85 import decode_ascii85_block

print(decode_ascii85_block(b"9jqo^"))   # b'Man '
```

Scan a number:

```python
from pycos.scanner import Scanner

scanner = Scanner(b"  1234 obj")
scanner.skip_whitespace()
print(scanner.read_unsigned(10))   # 1234
```

## Errors

Operations that fail raise `pycos.errors.CosError`. Its `code` attribute holds an
`ErrorCode` member (`INVALID_ARGUMENT`, `OUT_OF_RANGE` or `MEMORY`), and its `message`
attribute says what went wrong.

## What the package does not do

- It does not parse PDF files. There is no tokenizer, no object parser and no
  cross-reference reader.
- `Document` has no loader. `Document.get_object` returns `None` because nothing fills the
  document's object table.
- The filters only decode. None of them can write or encode data.
- There is no command-line tool.

## Running the tests

```
pytest
```