import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

VALUE_KEYS = ("values", "puzzle", "quizzes", "quiz", "grid")
SOLUTION_KEYS = ("solution", "solutions")


def load_puzzles(file_path: str) -> List[Dict[str, Any]]:
    """
    Reads puzzles from a file. Handles .parquet, .csv, .json, .jsonl and
    plain-text (.txt/.sdk) formats.
    Returns a list of records with ``id``, ``values`` and, when present,
    ``mask`` and ``solution``.
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    stem = Path(file_path).stem

    def _is_nonempty_str(value: Any) -> bool:
        return isinstance(value, str) and value.strip() != ""

    def _first_str(record: Dict[str, Any], keys) -> Optional[str]:
        for key in keys:
            value = record.get(key)
            if _is_nonempty_str(value):
                return value.strip()
        return None

    def _normalize_record(record: Dict[str, Any], index: int) -> Dict[str, Any]:
        out: Dict[str, Any] = {"id": str(record.get("id") or f"{stem}-{index}")}
        values = _first_str(record, VALUE_KEYS)
        if values is not None:
            out["values"] = values
        mask = _first_str(record, ("mask",))
        if mask is not None:
            out["mask"] = mask
        solution = _first_str(record, SOLUTION_KEYS)
        if solution is not None:
            out["solution"] = solution
        return out

    def _normalize_all(records: List[Any]) -> List[Dict[str, Any]]:
        return [
            _normalize_record(r, i) for i, r in enumerate(records) if isinstance(r, dict)
        ]

    # Case 1: Parquet / CSV (tabular)
    if file_path.endswith(".parquet"):
        df = pd.read_parquet(file_path)
        return _normalize_all(df.to_dict(orient="records"))

    if file_path.endswith(".csv"):
        # Keep leading zeros in puzzle strings.
        df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        return _normalize_all(df.to_dict(orient="records"))

    # Case 2: plain text, one puzzle per line ("values" or "values mask")
    if file_path.endswith((".txt", ".sdk")):
        data = []
        with open(file_path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                parts = line.split()
                record = {"values": parts[0]}
                if len(parts) > 1:
                    record["mask"] = parts[1]
                data.append(record)
        return _normalize_all(data)

    # Case 3: JSON File (array or object)
    if file_path.endswith(".json"):
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                payload = json.load(f)
            if isinstance(payload, list):
                return _normalize_all(payload)
            if isinstance(payload, dict):
                return _normalize_all([payload])
            return []
        except json.JSONDecodeError:
            # Some sources use ".json" but actually store JSONL; fall back to line-delimited parsing.
            pass

    # Case 4: JSONL File
    data = []
    with open(file_path, "r", encoding="utf-8") as f:
        for line in f:
            if not line.strip():
                continue
            try:
                obj = json.loads(line)
            except json.JSONDecodeError:
                continue
            data.append(obj)
    return _normalize_all(data)
