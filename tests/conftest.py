from pathlib import Path

import pytest


@pytest.fixture
def write_lines(tmp_path):
    def _write(lines, name="input.txt") -> Path:
        path = tmp_path / name
        path.write_text("".join(line + "\n" for line in lines))
        return path

    return _write
