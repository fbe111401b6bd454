"""Verify that the libraries Typography Flow needs are importable."""

from __future__ import annotations

import importlib
import sys
from typing import List, Tuple

# (display name, import name)
REQUIRED_MODULES = (
    ("Markdown", "markdown"),
    ("pandas", "pandas"),
    ("PyYAML", "yaml"),
    ("tomli", "tomli"),
)


def check_dependencies() -> List[Tuple[str, bool, str]]:
    """Check required dependencies. Returns list of (name, ok, message)."""
    results: List[Tuple[str, bool, str]] = []

    for name, module_name in REQUIRED_MODULES:
        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            results.append((name, False, f"Missing: {e}"))
            continue
        version = getattr(module, "__version__", None)
        results.append((name, True, f"OK, version {version}" if version else "OK"))

    return results


def run_check(verbose: bool = True) -> bool:
    """Run dependency check, print report, return True if all OK."""
    results = check_dependencies()
    ok_count = sum(1 for _, ok, _ in results if ok)
    all_ok = ok_count == len(results)

    if verbose:
        print("Dependency check\n")
        for name, ok, msg in results:
            if ok:
                print(f"  {name}: {msg}")
            else:
                print(f"  {name}: MISSING  {msg}")
        print()
        if all_ok:
            print("All required dependencies are installed.")
        else:
            print(f"{len(results) - ok_count} of {len(results)} missing. Install them with: pip install -e .")

    return all_ok


if __name__ == "__main__":
    success = run_check(verbose=True)
    sys.exit(0 if success else 1)
