import base64

from wsserve.websocket import ws_handshake


def test_known_handshake_value():
    assert ws_handshake("dGhlIHNhbXBsZSBub25jZQ==") == "s3pPLMBiTxaQ9kYGzzhZRbK+xOo="


def test_surrounding_whitespace_is_ignored():
    key = "dGhlIHNhbXBsZSBub25jZQ=="
    assert ws_handshake("  " + key + " \r\n") == ws_handshake(key)


def test_result_is_base64_of_sha1_length():
    accept = ws_handshake("AQIDBAUGBwgJCgsMDQ4PEC==")
    assert len(base64.b64decode(accept)) == 20


def test_different_keys_give_different_accepts():
    assert ws_handshake("a2V5LW9uZQ==") != ws_handshake("a2V5LXR3bw==")