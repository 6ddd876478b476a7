#!/usr/bin/env python3
"""
Install each Lambda function's requirements.txt into its ``.deps`` directory.

Useful for running a function locally from its own directory; the build script
installs dependencies into the zip on its own.
"""
import subprocess
import sys
from pathlib import Path
from typing import Callable, List

from build import discover_functions

DEPS_DIR = ".deps"


def install_function_deps(function_dir: Path, run: Callable = subprocess.run) -> bool:
    """Install one function's requirements; returns False when it has none."""
    requirements_file = function_dir / "requirements.txt"
    if not requirements_file.exists():
        return False

    print(f"Installing dependencies for {function_dir.name}...")
    run([
        sys.executable, "-m", "pip", "install",
        "-r", str(requirements_file),
        "-t", str(function_dir / DEPS_DIR),
    ], check=True)
    return True


def install_all(src_dir: Path, run: Callable = subprocess.run) -> List[str]:
    functions = discover_functions(src_dir)
    print(f"Installing dependencies for functions: {[f.name for f in functions]}")
    return [f.name for f in functions if install_function_deps(f, run=run)]


def main():
    src_dir = Path(__file__).parent.parent / "src"
    try:
        install_all(src_dir)
    except subprocess.CalledProcessError as e:
        print(f"Failed to install dependencies: {e}", file=sys.stderr)
        sys.exit(1)

    print("All dependencies installed!")


if __name__ == "__main__":
    main()
