"""Shared test vectors for privatebin-cli tests."""

# base64 of bytes 0x00..0x1f and 0x1f..0x00
RANDOM_KEY = "AAECAwQFBgcICQoLDA0ODxAREhMUFRYXGBkaGxwdHh8="
OTHER_RANDOM_KEY = "Hx4dHBsaGRgXFhUUExIREA8ODQwLCgkIBwYFBAMCAQA="

# sha256("abc")
ABC_SHA256_HEX = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"

# Raw DEFLATE encoding of an empty stream
EMPTY_DEFLATE = b"\x03\x00"

# Payloads covering edge cases
TEST_PAYLOADS = {
    "empty": b"",
    "single_byte": b"X",
    "whitespace": b"   \t\n   ",
    "newlines": b"Line 1\nLine 2\nLine 3",
    "utf8": "Café ☕ 你好世界 Привет мир".encode("utf-8"),
    "emoji": "Hello 👋 World 🌍".encode("utf-8"),
    "json": b'{"key": "value", "num": 42}',
    "binary": bytes(range(256)),
    "zeros": bytes(4096),
    "long_text": b"The quick brown fox jumps over the lazy dog. " * 200,
}
