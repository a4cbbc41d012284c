# fixwire

Reusable pieces for producing data in the Financial Information eXchange
(FIX) protocol. fixwire is a library, not a FIX engine. It provides:

- **Field values** (`fixwire.fix_value`): serializes booleans, integers,
  strings, byte strings, dates and timestamps to their FIX wire form, and
  parses them back. Strict (`deserialize_int`) and lossy
  (`deserialize_int_lossy`) integer parsing are both available, for the
  integer kinds listed in `IntKind`.
- **SOFH** (`fixwire.sofh`): Simple Open Framing Header support. It has
  encoding types (`fixwire.sofh.encoding_type`), frames with their 6-byte
  header (`fixwire.sofh.frame`), and an incremental decoder for byte streams
  (`fixwire.sofh.decoder`).
- **FIX JSON encoding** (`fixwire.json.encoder`): a staged encoder that
  writes the header, then the body, then the trailer.
- **FIXS** (`fixwire.fixs`): the TLS cipher suites recommended for
  FIX-over-TLS, in IANA naming.
- **Session rules** (`fixwire.session`): heartbeat rules, sequence number
  tracking, the standard `Text <58>` messages, session settings and
  environment settings.

The package has no dependencies outside the standard library.

## Installation

```
pip install fixwire
```

To install the test dependencies as well:

```
pip install "fixwire[test]"
```

## Examples

### Field values

```python
import datetime
from fixwire.fix_value import IntKind, Padding, deserialize_bool, deserialize_int, serialize, to_string

assert to_string(True) == "Y"
assert deserialize_bool(b"N") is False
assert serialize(7, Padding.zeros(3)) == b"007"
assert deserialize_int(b"42", IntKind.U32) == 42
assert serialize(datetime.date(2021, 3, 9)) == b"20210309"
```

When a value is malformed, `deserialize_bool`, `deserialize_int` and the
other parsers raise subclasses of `FixValueError`: `WrongLengthError`,
`InvalidCharacterError` or `InvalidIntError`.

### SOFH frames

A frame's header holds the message length (4 bytes) followed by the
encoding type (2 bytes). Both are big-endian.

```python
from fixwire.sofh.frame import Frame
from fixwire.sofh.encoding_type import EncodingType

frame = Frame.decode(bytes([0, 0, 0, 7, 0xF0, 0x00, 42]))
assert frame.message == b"*"
assert EncodingType.from_int(frame.encoding_type) == EncodingType.from_bytes(b"\xf0\x00")
assert frame.to_bytes() == bytes([0, 0, 0, 7, 0xF0, 0x00, 42])
```

When there is not enough input to decode a whole frame,
`IncompleteError` is raised. It reports how many more bytes are needed in
its `needed` attribute. When the length field is below 6,
`InvalidMessageLengthError` is raised. Both errors come from
`fixwire.sofh.errors`.

To read a stream of frames, use `Decoder.read_frames` with any binary
reader:

```python
import io
from fixwire.sofh.decoder import Decoder

stream = io.BytesIO(Frame(0xF500, b"{}").to_bytes() * 2)
frames = list(Decoder().read_frames(stream))
assert [f.message for f in frames] == [b"{}", b"{}"]
```

If the stream ends partway through a frame, `read_frames` raises
`IncompleteError`. Read failures are raised as `SofhIOError`.

### FIX JSON encoding

```python
from fixwire.json.encoder import Encoder

encoder = Encoder()
text = (
    encoder.start_message()
    .with_header()
    .set("MsgType", "D")
    .with_body()
    .set("OrderQty", 100)
    .with_trailer()
    .done()
)
assert text == '{"StandardHeader":{"MsgType":"D"},"Body":{"OrderQty":"100"},"StandardTrailer":{}}'
```

A field can be given by name or as an object with a `name` attribute.
Values are written as JSON strings in their FIX form. The encoder always
writes compact JSON. `fixwire.json.config.Config` holds a `pretty_print`
setting, which is off by default. The encoder does not read it.

### FIXS cipher suites

```python
from fixwire.fixs import Version

suites = Version.V1_DRAFT.recommended_cs_iana(psk=False)
assert "TLS_DHE_RSA_WITH_AES_128_GCM_SHA256" in suites
```

### Session rules

Use `ExactHeartbeat`, `RangeHeartbeat` and `AnyHeartbeat` from
`fixwire.session.heartbeat_rule` to validate a heartbeat interval, given
as a `datetime.timedelta`, that a counterparty has proposed. When a
proposal is rejected, `InvalidHeartbeatError` is raised, carrying the
standard explanation text from `fixwire.session.errs`.

`SeqNumbers` from `fixwire.session.seq_numbers` tracks the next expected
inbound and outbound sequence numbers. When `validate_inbound` checks an
inbound number, a number that is too low raises `SeqNumberTooLowError`,
and a number that is too high raises `SeqNumberRecoverError`.
`ResendRequestRange` holds the range of a resend request. That range may
be open-ended.

`fixwire.session.config` provides `Config`, which holds the
test-indicator check flag and the maximum allowed latency. It also
provides `Environment`, built with `Environment.production(allow_test)`
or `Environment.testing()`, whose `allows_testing()` reports whether test
messages are accepted.

## What fixwire does not do

- It does not decode FIX JSON messages. Only encoding is provided.
- It has no tag-value (classic `8=FIX...`) message encoder or decoder, and
  no FIX dictionaries.
- It does not run FIX sessions. There is no connection handling, logon
  handling, heartbeat timers or event loop. The session modules only hold
  rules and state that a session would use.
- It does not set up TLS. `fixwire.fixs` only lists cipher suite names.

## Running the tests

```
pytest
```