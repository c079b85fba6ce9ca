import struct

import pytest

from pyyabai.codec import decode_response, encode_message, frame_message
from pyyabai.models import YabaiCommandError, YabaiError, YabaiFormatError


def test_encode_message():
    assert encode_message("space --focus 2") == b"space\x00--focus\x002\x00\x00"


def test_encode_message_single_token():
    assert encode_message("query") == b"query\x00\x00"


def test_encode_message_trims():
    assert encode_message("  window --toggle float \n") == b"window\x00--toggle\x00float\x00\x00"


def test_encode_message_splits_on_single_spaces():
    # inner runs of spaces are kept as empty tokens
    assert encode_message("space  --balance") == b"space\x00\x00--balance\x00\x00"


def test_encode_message_utf8():
    assert encode_message("space --label café") == "space\x00--label\x00café\x00\x00".encode()


@pytest.mark.parametrize(
    "message",
    ["space --focus 2", "query --windows --space 3", "window --toggle zoom-fullscreen"],
)
def test_encoded_layout(message):
    tokens = message.split(" ")
    expected = b"\x00".join(t.encode() for t in tokens) + b"\x00\x00"
    framed = frame_message(encode_message(message))
    (length,) = struct.unpack("<I", framed[:4])
    assert length == len(expected)
    assert framed[4:] == expected


def test_frame_message():
    assert frame_message(b"ab\x00\x00") == b"\x04\x00\x00\x00ab\x00\x00"


def test_frame_message_large_length_is_little_endian():
    payload = b"x" * 0x0102
    assert frame_message(payload)[:4] == b"\x02\x01\x00\x00"


def test_decode_text():
    assert decode_response("query --spaces", b"[]") == "[]"


def test_decode_empty_is_none():
    result = decode_response("space --balance", b"")
    assert result is None


def test_decode_error_sentinel():
    with pytest.raises(YabaiCommandError) as exc_info:
        decode_response("space --focus 42", b"\x07bad")
    assert exc_info.value.message == "bad"
    assert exc_info.value.command == "space --focus 42"
    assert str(exc_info.value) == "CommandError: 'space --focus 42' caused 'bad'"


def test_decode_lone_sentinel():
    with pytest.raises(YabaiCommandError) as exc_info:
        decode_response("window --focus west", b"\x07")
    assert exc_info.value.message == ""


def test_decode_sentinel_only_at_start():
    assert decode_response("query --windows", b"ok\x07") == "ok\x07"


def test_decode_invalid_utf8():
    with pytest.raises(YabaiFormatError):
        decode_response("query --windows", b"\xff\xfe")


def test_decode_invalid_utf8_in_error():
    with pytest.raises(YabaiFormatError) as exc_info:
        decode_response("query --windows", b"\x07\xff")
    assert not isinstance(exc_info.value, YabaiCommandError)
    assert isinstance(exc_info.value, YabaiError)
