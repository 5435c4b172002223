#!/usr/bin/env python3
"""
Simple script to check voice_quote sources and tests for syntax errors
"""
import ast
import sys
from pathlib import Path

CHECKED_DIRS = ("voice_quote", "tests")


def check_file(file_path):
    """Check a Python file for syntax errors"""
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            content = f.read()

        ast.parse(content, filename=str(file_path))
        print(f"✓ {file_path} - OK")
        return True

    except SyntaxError as e:
        print(f"✗ {file_path} - Syntax Error: {e}")
        return False
    except OSError as e:
        print(f"✗ {file_path} - Error: {e}")
        return False


def main():
    """Check all Python files in the package and test directories"""
    python_files = []
    for directory in CHECKED_DIRS:
        path = Path(directory)
        if not path.exists():
            print(f"{directory} directory not found")
            continue
        python_files.extend(sorted(path.rglob("*.py")))

    if not python_files:
        print("No Python files found")
        return 1

    print(f"Checking {len(python_files)} Python files...")
    print()

    success_count = sum(1 for py_file in python_files if check_file(py_file))

    print()
    print(f"Results: {success_count}/{len(python_files)} files passed")

    if success_count == len(python_files):
        print("All files passed syntax check!")
        return 0

    print("Some files have issues - see above")
    return 1


if __name__ == "__main__":
    sys.exit(main())
