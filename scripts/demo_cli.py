#!/usr/bin/env python
"""Demo: CLI usage for random text and byte generation."""

import subprocess
import tempfile
from pathlib import Path


def run(cmd: str) -> None:
    """Run a command and print its output."""
    print(f"$ {cmd}")
    result = subprocess.run(cmd, shell=True, capture_output=True, text=True)
    print(result.stdout)
    if result.stderr:
        print(result.stderr)


def main() -> None:
    with tempfile.TemporaryDirectory() as tmpdir:
        block = Path(tmpdir) / "block.json"

        print("=" * 60)
        print("Demo: CLI Usage")
        print("=" * 60)

        print("\n--- Presets ---")
        run("uv run randomizer presets")
        run("uv run randomizer generate -n 12 -p alphanumeric --seed 42")

        print("\n--- Custom charsets ---")
        run("uv run randomizer generate -n 6 -c u -s ' '")
        run("uv run randomizer generate -n 4 -w foo,bar,baz -s -")
        run("uv run randomizer generate -n 8 -c 'ó❤⚙' -m characters")

        print("\n--- Bytes ---")
        run("uv run randomizer generate -n 16 -m bytes -f hex")
        run(f"uv run randomizer generate -n 16 -m bytes -o {block}")
        print(block.read_text())

        print("\n--- Errors ---")
        run("uv run randomizer generate -n 4 --hex-bytes c3 -m characters")

        print("\n" + "=" * 60)
        print("Demo complete!")
        print("=" * 60)


if __name__ == "__main__":
    main()
