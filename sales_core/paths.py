"""
sales_core.paths
Output folder helpers.
"""
from __future__ import annotations
from pathlib import Path

OUTPUT_DIR = Path("output")
OUT_PDF_DIR = OUTPUT_DIR / "pdf"
OUT_LOG_DIR = OUTPUT_DIR / "logs"

def ensure_output_dirs(base: Path = Path(".")) -> None:
    (base / OUT_PDF_DIR).mkdir(parents=True, exist_ok=True)
    (base / OUT_LOG_DIR).mkdir(parents=True, exist_ok=True)

def out_path(kind: str, filename: str, base: Path = Path(".")) -> Path:
    ensure_output_dirs(base)
    k = kind.lower()
    if k == "pdf":
        return base / OUT_PDF_DIR / filename
    if k == "log":
        return base / OUT_LOG_DIR / filename
    raise ValueError(f"Unknown output kind: {kind}")
