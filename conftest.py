"""Test configuration for fks_worker queues.
Ensures local src root on sys.path for imports without editable install.
"""
from __future__ import annotations
import sys, pathlib
ROOT = pathlib.Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.is_dir():
    sp = str(SRC)
    if sp not in sys.path:
        sys.path.insert(0, sp)
