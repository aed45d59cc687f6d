import pytest

from moodengine.link import MAX_PAYLOAD, Mailbox, decode, encode, parse_bssid


def test_encode_decode_round_trip():
    for text in ["", "hello", "cmd:dance 3", "caf\u00e9"]:
        assert decode(encode(text)) == text


def test_encode_ascii_is_byte_for_byte():
    assert encode("hi") == b"hi"


def test_encode_rejects_oversized_message():
    assert len(encode("x" * MAX_PAYLOAD)) == MAX_PAYLOAD
    with pytest.raises(ValueError):
        encode("x" * (MAX_PAYLOAD + 1))


def test_parse_bssid():
    assert parse_bssid("12:34:56:78:9a:bc") == bytes([0x12, 0x34, 0x56, 0x78, 0x9A, 0xBC])


def test_parse_bssid_uppercase_and_trailing_text():
    assert parse_bssid("0A:0B:0C:0D:0E:0F rest") == bytes([0x0A, 0x0B, 0x0C, 0x0D, 0x0E, 0x0F])


@pytest.mark.parametrize("text", ["", "12:34:56", "zz:34:56:78:9a:bc"])
def test_parse_bssid_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_bssid(text)


def test_mailbox_starts_empty():
    box = Mailbox()
    assert box.available() is False
    assert box.receive() == ""


def test_mailbox_deliver_and_receive_clears():
    box = Mailbox()
    box.deliver(b"wave")
    assert box.available() is True
    assert box.receive() == "wave"
    assert box.available() is False


def test_mailbox_keeps_latest_message():
    box = Mailbox()
    box.deliver(b"first")
    box.deliver(b"second")
    assert box.receive() == "second"