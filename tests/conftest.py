import stat
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from monolith_api.config import MonolithConfig, Settings
from monolith_api.main import create_app
from monolith_api.services.archiver import Archiver

# Stands in for monolith: echoes its argv and stdin as JSON unless told otherwise
FAKE_MONOLITH = '''
import json
import os
import sys

bulk = int(os.environ.get("FAKE_MONOLITH_BULK", "0"))
if bulk:
    sys.stdout.write("x" * bulk)
    sys.stdout.flush()
    sys.stderr.write("y" * bulk)
    sys.stderr.flush()

data = sys.stdin.buffer.read().decode("utf-8")

if "FAKE_MONOLITH_STDOUT" in os.environ:
    sys.stdout.write(os.environ["FAKE_MONOLITH_STDOUT"])
elif not bulk:
    sys.stdout.write(json.dumps({"argv": sys.argv[1:], "stdin": data}))
sys.stderr.write(os.environ.get("FAKE_MONOLITH_STDERR", ""))
sys.exit(int(os.environ.get("FAKE_MONOLITH_EXIT", "0")))
'''


@pytest.fixture
def fake_monolith(tmp_path: Path) -> Path:
    script = tmp_path / "fake_monolith.py"
    script.write_text(FAKE_MONOLITH, encoding="utf-8")

    wrapper = tmp_path / "monolith"
    wrapper.write_text(f'#!/bin/sh\nexec "{sys.executable}" "{script}" "$@"\n', encoding="utf-8")
    wrapper.chmod(wrapper.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return wrapper


@pytest.fixture
def archiver(fake_monolith: Path) -> Archiver:
    return Archiver(MonolithConfig(executable=str(fake_monolith)))


@pytest.fixture
def client(fake_monolith: Path) -> TestClient:
    app = create_app(Settings(use_bundled_monolith=False, monolith_command=str(fake_monolith)))
    return TestClient(app)
