"""
keyword_cipher — Live Demo
==========================
Run:  python examples/demo_keystream.py

Drives the core the way a message loop built on top of it would:
one key character pulled per text character, shifted, then reversed.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from keyword_cipher import KeyGenerator, InvalidKeyword, shift, unshift, wrapped_shift

LINE = "═" * 70
MSG  = "Attack at dawn, 0600!"

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=' %(message)s')

    print(f"\n{LINE}")
    print("  keyword_cipher — Key Stream + Wrapped Shift Demo")
    print(LINE)
    print(f"  Message: {MSG}\n")

    # ── key stream ───────────────────────────────────────────────────────────
    header("Key stream — 'queen'")
    keys = KeyGenerator("queen")
    ok("First 12 keys", " ".join(next(keys) for _ in range(12)))

    lowered = KeyGenerator("QUEEN", retain_case=True)
    ok("retain_case=True", " ".join(next(lowered) for _ in range(6)))

    try:
        KeyGenerator("")
    except InvalidKeyword as e:
        ok("Empty keyword rejected", str(e))

    # ── encrypt / decrypt ────────────────────────────────────────────────────
    header("Shift — one key char per text char")
    enc_keys = KeyGenerator("lemon")
    ct = "".join(shift(ch, next(enc_keys)) for ch in MSG)
    dec_keys = KeyGenerator("lemon")
    pt = "".join(unshift(ch, next(dec_keys)) for ch in ct)
    ok("Encrypted", ct)
    ok("Decrypted", pt)
    assert pt == MSG

    # ── plain shift ──────────────────────────────────────────────────────────
    header("Wrapped shift — fixed amount")
    ok("ROT13", "".join(wrapped_shift(ch, 13) for ch in MSG))
    ok("Caesar -3", "".join(wrapped_shift(ch, -3) for ch in MSG))

    print(f"\n{LINE}")
    print("  Not secure. For study only.")
    print(f"{LINE}\n")
