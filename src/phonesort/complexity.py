from __future__ import annotations

import math
from typing import Callable, Dict, List, Tuple

import pandas as pd


def _basis_functions() -> Dict[str, Callable[[float], float]]:
    # positive n only
    return {
        "O(1)": lambda n: 1.0,
        "O(log n)": lambda n: math.log(max(n, 2)),
        "O(n)": lambda n: float(n),
        "O(n log n)": lambda n: float(n) * math.log(max(n, 2)),
        "O(n^2)": lambda n: float(n) ** 2,
    }


def _fit_single(x: List[float], y: List[float], basis: Callable[[float], float]) -> Tuple[float, float]:
    # Fit y = exp(a) * f(n), i.e. log y = a + log f(n), by least squares on a
    resid = []
    for n, val in zip(x, y):
        fv = basis(n)
        if fv <= 0 or val <= 0:
            continue
        resid.append(math.log(val) - math.log(fv))
    if len(resid) < 2:
        return float("inf"), 0.0
    nobs = len(resid)
    a = sum(resid) / nobs
    rss = sum((r - a) ** 2 for r in resid)
    k = 1
    aic = nobs * math.log(rss / nobs) + 2 * k if rss > 0 else -float("inf")
    return aic, a


def fit_models(df: pd.DataFrame, x_col: str = "count", y_col: str = "sort_seconds_median", by: str = "method") -> pd.DataFrame:
    """Pick the growth model with the lowest AIC for each group.

    Returns a DataFrame with columns: by, model, a, aic, nobs
    """
    results = []
    bases = _basis_functions()
    if df.empty:
        return pd.DataFrame(results)
    for key, group in df.groupby(by, dropna=False):
        x = group[x_col].tolist()
        y = group[y_col].tolist()
        best = (float("inf"), None, None)
        for name, fn in bases.items():
            aic, a = _fit_single(x, y, fn)
            if aic < best[0]:
                best = (aic, name, a)
        aic, name, a = best
        if name is None:
            continue
        results.append({by: key, "model": name, "a": a, "aic": aic, "nobs": len(group)})
    return pd.DataFrame(results)
