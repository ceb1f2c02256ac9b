"""Verify seeded ID output is identical across repeated interpreter runs."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path


ROOT = Path(__file__).resolve().parents[1]
SCRIPT = ROOT / "examples" / "seeded_ids.py"


def main() -> None:
    outputs: list[bytes] = []

    env = dict(os.environ)
    env["PYTHONPATH"] = str(ROOT)

    for _ in range(3):
        result = subprocess.run(
            [sys.executable, str(SCRIPT)],
            cwd=str(ROOT),
            env=env,
            capture_output=True,
            check=False,
        )
        if result.returncode != 0:
            raise RuntimeError(result.stderr.decode("utf-8", errors="replace"))
        outputs.append(result.stdout)

    if not (outputs[0] == outputs[1] == outputs[2]):
        raise AssertionError("Seeded ID output is not deterministic across repeated runs.")

    print("Determinism check passed: seeded IDs identical across 3 runs.")


if __name__ == "__main__":
    main()
