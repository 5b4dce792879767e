"""
Vigenère Polyalphabetic Cipher Engine
=====================================
Classic repeating-key Vigenère over the uppercase Latin alphabet.

Each letter of the message is shifted by the alphabet position of the
key letter under the key cursor (A=0 ... Z=25). The cursor advances only
on letters, so spaces, digits and punctuation pass through untouched and
never consume a key position.

Letters are classified as ASCII letters (upper or lower case) but are
always shifted relative to 'A'. Messages are expected to be uppercase;
lowercase letters still consume a key position and produce an
uppercase-alphabet result that does not round-trip to the original.

Keys are expected to be uppercase A-Z. Other key characters are not
rejected: their shift is ord(ch) - ord('A'), reduced modulo 26.

Not thread-safe: the key is a plain mutable field. Each call reads the
key once, so a single call always sees one key.
"""

import logging

from cryptography.hazmat.primitives import constant_time

logger = logging.getLogger(__name__)


class InvalidKeyError(ValueError):
    """Raised when an operation is attempted with an empty key."""


class VigenereCipher:
    """
    Vigenère cipher engine holding a mutable key.

    encrypt/decrypt are mirror images: decrypt(encrypt(m)) == m for any
    message whose letters are uppercase A-Z, under an unchanged key.
    """

    ALPHA   = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    BASE    = ord("A")
    MODULUS = 26

    def __init__(self, key: str):
        """Key should be uppercase A-Z. It is stored as given."""
        self._key = key
        logger.debug(f"VigenereCipher created | key={len(key)} chars")

    @property
    def key(self) -> str:
        return self._key

    def set_key(self, new_key: str) -> None:
        """Replace the key. Applies to every later call."""
        self._key = new_key
        logger.debug(f"Key replaced | key={len(new_key)} chars")

    @classmethod
    def shift_forward(cls, ch: str, n: int) -> str:
        return chr(cls.BASE + (ord(ch) - cls.BASE + n) % cls.MODULUS)

    @classmethod
    def shift_backward(cls, ch: str, n: int) -> str:
        return chr(cls.BASE + (ord(ch) - cls.BASE - n + cls.MODULUS) % cls.MODULUS)

    @staticmethod
    def _is_letter(ch: str) -> bool:
        # ASCII only; accented and other non-ASCII letters pass through
        return ch.isascii() and ch.isalpha()

    def _checked_key(self) -> str:
        key = self._key
        if not key:
            raise InvalidKeyError("Vigenère key must not be empty.")
        return key

    def _transform(self, message: str, shift) -> str:
        key = self._checked_key()
        key_len = len(key)
        out = []
        j = 0
        for ch in message:
            if self._is_letter(ch):
                out.append(shift(ch, ord(key[j % key_len]) - self.BASE))
                j += 1
            else:
                out.append(ch)
        logger.debug(f"Transformed {len(message)} chars | {j} letters keyed")
        return "".join(out)

    def encrypt(self, message: str) -> str:
        """Encrypt message. Non-letters pass through unchanged."""
        return self._transform(message, self.shift_forward)

    def decrypt(self, message: str) -> str:
        """Decrypt message. Non-letters pass through unchanged."""
        return self._transform(message, self.shift_backward)

    def is_encrypted(self, encrypted_msg: str, plaintext_msg: str) -> bool:
        """
        True iff encrypted_msg is exactly encrypt(plaintext_msg) under the
        current key. Compared in constant time.
        """
        expected = self.encrypt(plaintext_msg)
        return constant_time.bytes_eq(
            expected.encode("utf-8", "surrogatepass"),
            encrypted_msg.encode("utf-8", "surrogatepass"),
        )

    def __repr__(self):
        return f"VigenereCipher(key_len={len(self._key)})"


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=' %(message)s')

    v = VigenereCipher("KEY")
    ct = v.encrypt("HELLO")
    print(f"HELLO -> {ct}")
    print(f"{ct} -> {v.decrypt(ct)}")
    print(f"Verified: {v.is_encrypted(ct, 'HELLO')}")
