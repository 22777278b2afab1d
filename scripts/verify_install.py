#!/usr/bin/env python
"""
Room Scan - Installation Verification Script

Run this script to verify all dependencies are correctly installed.
"""

import sys
from pathlib import Path

# Add project root to path for package import
sys.path.insert(0, str(Path(__file__).parent.parent))


def check_package(name: str, import_name: str = None, version_attr: str = "__version__") -> tuple[bool, str]:
    """Check if a package is installed and return version."""
    import_name = import_name or name
    try:
        module = __import__(import_name)
        version = getattr(module, version_attr, "unknown")
        return True, str(version)
    except ImportError as e:
        return False, str(e)


def check_constants() -> tuple[bool, str]:
    """Check if constants module loads correctly."""
    try:
        from roomscan.constants import (
            DEFAULT_CEILING_HEIGHT_M,
            MIN_WALL_COUNT,
        )
        return True, f"loaded ({DEFAULT_CEILING_HEIGHT_M=}, {MIN_WALL_COUNT=})"
    except ImportError as e:
        return False, str(e)


def check_settings() -> tuple[bool, str]:
    """Check if settings.yaml loads correctly."""
    try:
        from roomscan.config import DEFAULT_SETTINGS_PATH, load_settings
        if not DEFAULT_SETTINGS_PATH.exists():
            return False, "settings.yaml not found"
        settings = load_settings(DEFAULT_SETTINGS_PATH)
        return True, f"units: {settings.units}, decimals: {settings.decimals}"
    except Exception as e:
        return False, str(e)


def check_engine() -> tuple[bool, str]:
    """Run a one-wall extraction as a smoke test."""
    try:
        from roomscan.geometry import Surface, Vector3, extract_dimensions
        wall = Surface(identifier="wall_0", dimensions=Vector3(3.0, 2.4, 0.0))
        dims = extract_dimensions(walls=[wall])
        return True, f"wall area {dims.total_wall_area:.2f} m2"
    except Exception as e:
        return False, str(e)


def main():
    print("=" * 60)
    print("Room Scan - Installation Verification")
    print("=" * 60)
    print()

    results = []

    # Core packages
    print("Core Dependencies:")
    print("-" * 40)

    packages = [
        ("numpy", "numpy", "__version__"),
        ("shapely", "shapely", "__version__"),
        ("pyyaml", "yaml", "__version__"),
    ]

    for name, import_name, version_attr in packages:
        ok, info = check_package(name, import_name, version_attr)
        status = "PASS" if ok else "FAIL"
        print(f"  {name:25} [{status}] {info}")
        results.append((name, ok))

    print()
    print("Configuration:")
    print("-" * 40)

    # Constants
    ok, info = check_constants()
    status = "PASS" if ok else "FAIL"
    print(f"  {'constants.py':25} [{status}] {info}")
    results.append(("constants", ok))

    # Settings
    ok, info = check_settings()
    status = "PASS" if ok else "FAIL"
    print(f"  {'settings.yaml':25} [{status}] {info}")
    results.append(("settings", ok))

    # Engine
    ok, info = check_engine()
    status = "PASS" if ok else "FAIL"
    print(f"  {'extraction engine':25} [{status}] {info}")
    results.append(("engine", ok))

    print()
    print("=" * 60)

    # Summary
    passed = sum(1 for _, ok in results if ok)
    total = len(results)

    if passed == total:
        print(f"ALL CHECKS PASSED ({passed}/{total})")
        print("Environment is ready for room scan processing.")
        return 0
    else:
        failed = [name for name, ok in results if not ok]
        print(f"SOME CHECKS FAILED ({passed}/{total})")
        print(f"Failed: {', '.join(failed)}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
