from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from .errors import ConfigError

INPUT_FILENAME = "InputPhoneNumbers.txt"
OUTPUT_FILENAME = "OutputPhoneNumbers.txt"


@dataclass
class Files:
    directory: Path = field(default_factory=Path.cwd)
    input_name: str = INPUT_FILENAME
    output_name: str = OUTPUT_FILENAME

    def __post_init__(self):
        self.directory = Path(self.directory)

    @property
    def input_path(self) -> Path:
        return self.directory / self.input_name

    @property
    def output_path(self) -> Path:
        return self.directory / self.output_name


@dataclass
class Config:
    files: Files = field(default_factory=Files)
    seed: Optional[int] = None
    results: Optional[Path] = None

    def __post_init__(self):
        if self.results is not None:
            self.results = Path(self.results)


def load_config(path: Optional[Path] = None) -> Config:
    if path is None:
        return Config()
    try:
        data = yaml.safe_load(Path(path).read_text()) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")
    unknown = sorted(set(data) - {"files", "seed", "results"})
    if unknown:
        raise ConfigError(f"{path}: unknown keys {', '.join(map(str, unknown))}")
    try:
        files = Files(**(data.get("files") or {}))
        return Config(files=files, seed=data.get("seed"), results=data.get("results"))
    except TypeError as exc:
        # unknown keys in the mapping
        raise ConfigError(f"{path}: {exc}") from exc
