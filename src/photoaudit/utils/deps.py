"""Dependency checking utilities."""

import importlib


def check_python_dependencies() -> dict[str, bool]:
    """Check availability of Python packages.

    Returns:
        Dict mapping package names to availability status.
    """
    packages = {
        "Pillow": "PIL",
        "pydantic": "pydantic",
        "PyYAML": "yaml",
    }
    status = {}
    for name, module in packages.items():
        try:
            importlib.import_module(module)
            status[name] = True
        except ImportError:
            status[name] = False
    return status


def check_all_dependencies() -> dict[str, dict[str, bool]]:
    """Check all dependencies.

    Returns:
        Dict with a 'python' key containing the availability dict.
    """
    return {"python": check_python_dependencies()}


def print_dependency_status() -> None:
    """Print dependency status to stdout."""
    deps = check_all_dependencies()

    print("photoaudit dependency status:")
    print("=" * 40)

    print("\nPython packages:")
    for name, available in sorted(deps["python"].items()):
        icon = "✓" if available else "✗"
        print(f"  {icon} {name}")

    python_count = sum(deps["python"].values())
    print(f"\nSummary: {python_count}/{len(deps['python'])} Python packages")
