import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def example_file(tmp_path):
    """Factory writing a dedented puzzle example to a file under tmp_path."""
    counter = {"n": 0}

    def _write(text: str, dedent: bool = True) -> Path:
        if dedent:
            text = textwrap.dedent(text).lstrip("\n")
        counter["n"] += 1
        path = tmp_path / f"example{counter['n']}.txt"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
