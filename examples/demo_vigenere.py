"""
vigenere_tabula - Live Demo
===========================
Run:  python examples/demo_vigenere.py

Prints the tabula recta, then encrypts a message under a repeating
keyword and decrypts it with both strategies, checking they agree.
"""

import sys, os, time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vigenere_tabula.engine import CipherEngine
from vigenere_tabula.keys   import generate_key
from vigenere_tabula.demo   import render_table, KEYWORD, MESSAGE

LINE = "═" * 70

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

# ─────────────────────────────────────────────────────────────────────────────
header("Tabula recta")
engine = CipherEngine()
print(render_table(engine.table), end="")

header(f"Keyword {KEYWORD}")
key = generate_key(KEYWORD, len(MESSAGE))
ok("Key-stream", key)
ok("Message",    MESSAGE)

t0 = time.perf_counter()
ct = engine.encrypt(key, MESSAGE)
ok("Ciphertext", ct)

pt_table   = engine.decrypt_by_table_search(key, ct)
pt_modular = engine.decrypt_by_modular_inverse(key, ct)
elapsed = time.perf_counter() - t0
ok("Decrypted (table search)",   pt_table)
ok("Decrypted (modular inverse)", pt_modular)
ok("Round-trip", f"{elapsed*1000:.2f} ms")

print(f"\n{LINE}")
if pt_table == pt_modular == MESSAGE:
    print("  Both decryptors agree.")
    print(LINE + "\n")
else:
    print(f"  ✗  Mismatch: table={pt_table} modular={pt_modular}")
    print(LINE + "\n")
    sys.exit(1)
