"""Integration test fixtures: a stand-in cargo executable."""

import os
import stat
import sys
from pathlib import Path

import pytest

FAKE_CARGO = """\
#!{python}
import json
import os
import sys

with open(os.environ["FAKE_CARGO_LOG"], "a") as log:
    log.write(json.dumps({{"cwd": os.getcwd(), "args": sys.argv[1:]}}) + "\\n")

failing = os.environ.get("FAKE_CARGO_FAIL_IN", "")
sys.exit(3 if failing and os.path.basename(os.getcwd()) == failing else 0)
"""


@pytest.fixture
def fake_cargo(tmp_path: Path) -> Path:
    """Write an executable that records its cwd and argv, then exits."""
    if sys.platform == "win32":
        pytest.skip("shebang scripts are not executable on Windows")
    script = tmp_path / "bin" / "fake-cargo"
    script.parent.mkdir()
    script.write_text(FAKE_CARGO.format(python=sys.executable))
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


@pytest.fixture
def cargo_env(tmp_path: Path, fake_cargo: Path) -> dict[str, str]:
    """Environment pointing floki at the fake cargo."""
    env = dict(os.environ)
    env["FLOKI_CARGO"] = str(fake_cargo)
    env["FAKE_CARGO_LOG"] = str(tmp_path / "cargo.log")
    env.pop("CARGO", None)
    return env
