from __future__ import annotations

import json
from pathlib import Path
from typing import List, Tuple

import pandas as pd


def read_jsonl(path: Path) -> Tuple[List[dict], int]:
    """Return the decodable records and how many non-blank lines were not JSON."""
    rows = []
    skipped = 0
    with Path(path).open() as f:
        for line in f:
            if not line.strip():
                continue
            try:
                rows.append(json.loads(line))
            except json.JSONDecodeError:
                skipped += 1
    return rows, skipped


def summarize_runs(path: Path) -> pd.DataFrame:
    """Aggregate run records per (method, count) into medians and means.

    The number of malformed lines is kept in ``df.attrs["skipped"]``.
    """
    rows, skipped = read_jsonl(path)
    if not rows:
        df = pd.DataFrame()
        df.attrs["skipped"] = skipped
        return df
    df = pd.DataFrame(rows)
    agg = {
        "sort_seconds": ["median", "mean", "count"],
        "generate_seconds": ["median", "mean"],
        "rss_mb": ["median"],
    }
    g = df.groupby(["method", "count"], dropna=False).agg(agg)
    g.columns = ["_".join(col) for col in g.columns.to_flat_index()]
    g = g.rename(columns={"sort_seconds_count": "runs"})
    g = g.reset_index().sort_values(["method", "count"], ignore_index=True)
    g.attrs["skipped"] = skipped
    return g
