"""
vigenere_crypto — Vigenère Cipher Engine
========================================
Keyed, repeating-shift polyalphabetic substitution over A-Z.

    VigenereCipher   encrypt / decrypt / is_encrypted / set_key
    InvalidKeyError  raised when an operation runs with an empty key
"""

__version__ = "1.0.0"
__author__  = "vigenere_crypto contributors"

from .engine import VigenereCipher, InvalidKeyError

__all__ = [
    "VigenereCipher",
    "InvalidKeyError",
]
