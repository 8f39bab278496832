"""Filesystem helpers for localisation files."""
from __future__ import annotations

import os
from typing import List

from .validation import LOCALISATION_EXTENSIONS


def collect_localisation_files(root: str) -> List[str]:
    files: List[str] = []
    for dirpath, _, filenames in os.walk(root):
        for fn in filenames:
            if os.path.splitext(fn)[1].lower() in LOCALISATION_EXTENSIONS:
                files.append(os.path.join(dirpath, fn))
    files.sort()
    return files


def read_localisation_file(path: str) -> str:
    # Paradox localisation files are UTF-8 with a BOM
    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        return f.read()
