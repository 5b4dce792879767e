"""
vigenere_crypto — Live Demo
===========================
Run:  python examples/demo_vigenere.py

Walks the cipher engine through encrypt, decrypt, verification and
key replacement, printing each result.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vigenere_crypto import VigenereCipher, InvalidKeyError

LINE = "═" * 70
MSG  = "ATTACK AT DAWN, 1553!"

def header(step, name):
    print(f"\n{LINE}")
    print(f"  {step} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

logging.basicConfig(level=logging.INFO, format=' %(message)s')

print(f"\n{LINE}")
print("  vigenere_crypto — Cipher Engine Demo")
print(LINE)
print(f"  Message: {MSG}\n")

# ── ENCRYPT / DECRYPT ────────────────────────────────────────────────────────
header(1, "Encrypt / Decrypt with key LEMON")
v  = VigenereCipher("LEMON")
ct = v.encrypt(MSG)
pt = v.decrypt(ct)
ok("Encrypted", ct)
ok("Decrypted", pt)
ok("Length preserved", f"{len(MSG)} -> {len(ct)}")

# ── VERIFY ───────────────────────────────────────────────────────────────────
header(2, "Verification")
ok("is_encrypted(ct, MSG)",        str(v.is_encrypted(ct, MSG)))
ok("is_encrypted(ct, 'TAMPERED')", str(v.is_encrypted(ct, "TAMPERED")))

# ── KEY REPLACEMENT ──────────────────────────────────────────────────────────
header(3, "Key replacement")
v.set_key("A")
ok("Key A is identity", v.encrypt("ABC"))
ok("Old ciphertext verifies under new key", str(v.is_encrypted(ct, MSG)))

# ── EMPTY KEY ────────────────────────────────────────────────────────────────
header(4, "Empty key")
v.set_key("")
try:
    v.encrypt(MSG)
except InvalidKeyError as e:
    ok("Rejected", str(e))

print(f"\n{LINE}")
print("  Demo complete.")
print(f"{LINE}\n")
