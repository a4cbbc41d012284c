import json
from collections import namedtuple

import pytest

from fixwire.json.encoder import Encoder

Field = namedtuple("Field", "name tag")

SENDER_COMP_ID = Field("SenderCompID", 49)
MSG_SEQ_NUM = Field("MsgSeqNum", 34)


def test_empty_message_is_valid_json():
    message = Encoder().start_message().with_header().with_body().with_trailer().done()
    assert json.loads(message) == {"StandardHeader": {}, "Body": {}, "StandardTrailer": {}}


def test_fields_land_in_their_sections():
    message = (
        Encoder()
        .start_message()
        .with_header()
        .set(SENDER_COMP_ID, "ABC")
        .set(MSG_SEQ_NUM, 215)
        .with_body()
        .set("Text", "hello")
        .set("PossDupFlag", True)
        .with_trailer()
        .set("CheckSum", b"072")
        .done()
    )
    assert json.loads(message) == {
        "StandardHeader": {"SenderCompID": "ABC", "MsgSeqNum": "215"},
        "Body": {"Text": "hello", "PossDupFlag": "Y"},
        "StandardTrailer": {"CheckSum": "072"},
    }


def test_values_with_quotes_are_escaped():
    message = (
        Encoder().start_message().with_header().with_body().set("Text", 'a "b"').with_trailer().done()
    )
    assert json.loads(message)["Body"]["Text"] == 'a "b"'


def test_start_message_resets_previous_content():
    encoder = Encoder()
    encoder.start_message().with_header().set("SenderCompID", "X").with_body().with_trailer().done()
    second = encoder.start_message().with_header().with_body().with_trailer().done()
    assert json.loads(second)["StandardHeader"] == {}


def test_non_ascii_field_name_is_rejected():
    header = Encoder().start_message().with_header()
    with pytest.raises(ValueError):
        header.set("Prïce", "1")