"""Top-level package for the exam grading toolkit.

Provides subpackages:
- grading_toolkit.core – question, exam and student models, schemas, serialization
- grading_toolkit.grading – submission engine, course aggregation and statistics
- grading_toolkit.output – answer key and report rendering (text and PDF)
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.3.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    # Fallback to importlib.metadata for installed package
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("grading_toolkit")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__copyright__ = "Copyright 2026 grading_toolkit contributors"
__all__: list[str] = ["__version__"]
