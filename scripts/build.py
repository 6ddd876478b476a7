#!/usr/bin/env python3
"""
Build script for Python Lambda functions.

Every directory under ``src/`` that contains a ``lambda_function.py`` entry
point is packaged as ``build/<function>.zip`` together with the shared package
and the function's own ``requirements.txt`` dependencies.
"""
import os
import shutil
import subprocess
import sys
import zipfile
from pathlib import Path
from typing import List

ENTRY_POINT = "lambda_function.py"
SHARED_PACKAGE = "shared"
IGNORED_PATTERNS = shutil.ignore_patterns("__pycache__", "*.pyc", "test_*.py", ".deps")


def discover_functions(src_dir: Path) -> List[Path]:
    """Return function directories (those with an entry point), sorted by name."""
    return sorted(
        d for d in src_dir.iterdir()
        if d.is_dir() and (d / ENTRY_POINT).is_file()
    )


def install_requirements(function_dir: Path, target_dir: Path) -> None:
    requirements_file = function_dir / "requirements.txt"
    if not requirements_file.exists():
        return

    print(f"Installing dependencies for {function_dir.name}...")
    subprocess.run([
        sys.executable, "-m", "pip", "install",
        "-r", str(requirements_file),
        "-t", str(target_dir),
    ], check=True)


def zip_directory(source_dir: Path, zip_path: Path) -> None:
    with zipfile.ZipFile(zip_path, 'w', zipfile.ZIP_DEFLATED) as zipf:
        for root, _, files in os.walk(source_dir):
            for file in sorted(files):
                file_path = Path(root) / file
                zipf.write(file_path, file_path.relative_to(source_dir))


def build_function(function_dir: Path, src_dir: Path, build_dir: Path) -> Path:
    """Package one function with the shared package; returns the zip path."""
    function_name = function_dir.name
    zip_path = build_dir / f"{function_name}.zip"

    print(f"Building {function_name}...")

    # Create temporary directory for packaging
    temp_dir = build_dir / f"temp_{function_name}"
    if temp_dir.exists():
        shutil.rmtree(temp_dir)

    try:
        shutil.copytree(function_dir, temp_dir, ignore=IGNORED_PATTERNS)

        shared_dir = src_dir / SHARED_PACKAGE
        if shared_dir.is_dir():
            shutil.copytree(shared_dir, temp_dir / SHARED_PACKAGE, ignore=IGNORED_PATTERNS)

        install_requirements(function_dir, temp_dir)

        print(f"Creating {function_name}.zip...")
        zip_directory(temp_dir, zip_path)
    finally:
        shutil.rmtree(temp_dir, ignore_errors=True)

    print(f"{function_name}.zip created ({zip_path.stat().st_size} bytes)")
    return zip_path


def main():
    """Main build function"""
    project_root = Path(__file__).parent.parent
    src_dir = project_root / "src"
    build_dir = project_root / "build"

    build_dir.mkdir(exist_ok=True)

    functions = discover_functions(src_dir)
    if not functions:
        print(f"No Lambda functions found under {src_dir}", file=sys.stderr)
        sys.exit(1)

    print(f"Building Lambda functions: {[f.name for f in functions]}")

    for function_dir in functions:
        build_function(function_dir, src_dir, build_dir)

    print("Build complete!")


if __name__ == "__main__":
    main()
