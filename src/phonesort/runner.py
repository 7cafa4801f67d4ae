from __future__ import annotations

import json
import time
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional

import psutil

from .config import Config
from .generator import create_input_file
from .sorting import SortMethod, sort_file

Notify = Callable[[str, float], None]


@dataclass
class RunResult:
    ts: str
    count: int
    method: str
    generate_seconds: float
    sort_seconds: float
    rss_mb: float
    input_path: str
    output_path: str


def _rss_mb(proc: psutil.Process) -> float:
    try:
        return proc.memory_info().rss / (1024**2)
    except psutil.Error:
        return 0.0


def run_phone_sort(
    count: int,
    method: SortMethod,
    cfg: Config,
    notify: Optional[Notify] = None,
) -> RunResult:
    """Generate the input file, then sort it into the output file.

    ``notify`` receives each progress message with the seconds elapsed since the
    run started.
    """
    start = time.perf_counter()
    ts = datetime.now(timezone.utc).isoformat()
    proc = psutil.Process()

    def say(message: str) -> None:
        if notify is not None:
            notify(message, time.perf_counter() - start)

    input_path = cfg.files.input_path
    output_path = cfg.files.output_path

    say("Creating input file of phone numbers.")
    gen_start = time.perf_counter()
    create_input_file(input_path, count, seed=cfg.seed)
    generate_seconds = time.perf_counter() - gen_start
    rss = _rss_mb(proc)
    say("Done.")

    say("Creating output file of phone numbers.")
    sort_start = time.perf_counter()
    sort_file(method, input_path, output_path)
    sort_seconds = time.perf_counter() - sort_start
    rss = max(rss, _rss_mb(proc))
    say("Done.")

    return RunResult(
        ts=ts,
        count=count,
        method=method.value,
        generate_seconds=round(generate_seconds, 6),
        sort_seconds=round(sort_seconds, 6),
        rss_mb=round(rss, 3),
        input_path=str(input_path),
        output_path=str(output_path),
    )


def append_result(result: RunResult, out_path: Path) -> None:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("a") as f:
        f.write(json.dumps(asdict(result)) + "\n")
        f.flush()
