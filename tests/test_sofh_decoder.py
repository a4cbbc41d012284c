import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fixwire.sofh.decoder import Decoder
from fixwire.sofh.errors import IncompleteError, InvalidMessageLengthError, SofhIOError
from fixwire.sofh.frame import Frame


def test_empty_decoder_needs_a_full_header():
    decoder = Decoder()
    assert decoder.needed() == 6


def test_partial_header_needs_remaining_bytes():
    decoder = Decoder()
    decoder.feed(bytes([0, 0, 0]))
    assert decoder.needed() == 3


def test_complete_frame_is_available():
    decoder = Decoder()
    decoder.feed(bytes([0, 0, 0, 7, 0x0, 0x0, 42]))
    assert decoder.needed() == 0
    frame = decoder.current_frame()
    assert frame.message == bytes([42])
    assert frame.encoding_type == 0


def test_incomplete_frame_raises_on_attempt():
    decoder = Decoder()
    decoder.feed(Frame(0xF500, b"{}").to_bytes()[:-1])
    assert decoder.needed() == 1
    with pytest.raises(IncompleteError) as info:
        decoder.attempt_decoding()
    assert info.value.needed == 1


def test_invalid_length_is_reported():
    decoder = Decoder()
    decoder.feed(bytes([0, 0, 0, 3, 0, 0]))
    with pytest.raises(InvalidMessageLengthError):
        decoder.needed()
    with pytest.raises(InvalidMessageLengthError):
        decoder.current_frame()


def test_clear_discards_buffer():
    decoder = Decoder()
    decoder.feed(Frame(1, b"abc").to_bytes())
    decoder.clear()
    assert len(decoder) == 0
    with pytest.raises(IncompleteError):
        decoder.current_frame()


def test_read_frames_from_stream():
    frames = [Frame(0xF000, b"8=FIX.4.4"), Frame(0xF500, b"{}"), Frame(1, b"")]
    stream = io.BytesIO(b"".join(f.to_bytes() for f in frames))
    assert list(Decoder().read_frames(stream)) == frames


def test_read_frames_from_empty_stream():
    assert list(Decoder().read_frames(io.BytesIO(b""))) == []


def test_read_frames_truncated_stream_raises():
    data = Frame(2, b"payload").to_bytes()[:-2]
    with pytest.raises(IncompleteError):
        list(Decoder().read_frames(io.BytesIO(data)))


def test_read_frames_wraps_io_errors():
    class BrokenReader:
        def read(self, n):
            raise OSError("boom")

    with pytest.raises(SofhIOError) as info:
        list(Decoder().read_frames(BrokenReader()))
    assert isinstance(info.value.error, OSError)


@given(st.integers(min_value=0, max_value=0xFFFF), st.binary(max_size=64))
def test_byte_by_byte_feed_yields_same_frame(encoding_type, payload):
    frame = Frame(encoding_type, payload)
    decoder = Decoder()
    for byte in frame.to_bytes():
        assert decoder.needed() > 0
        decoder.feed(bytes([byte]))
    assert decoder.needed() == 0
    assert decoder.current_frame() == frame