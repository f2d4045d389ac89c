"""Top-level package for the multiple-choice question ingestion toolkit.

Provides subpackages:
- quiz_toolkit.ingest – bulk text parser (pasted text -> draft questions)
- quiz_toolkit.answers – read-path normalizers for correct answers and explanations
- quiz_toolkit.builder – write-path record builder (draft -> QuestionRecord)
- quiz_toolkit.export – plain-text rendering for exporters
- quiz_toolkit.core – shared models and schema validation
"""

def _get_version() -> str:
    """Get version from importlib.metadata (installed) or pyproject.toml (dev)."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    from pathlib import Path

    try:
        return pkg_version("quiz_toolkit")
    except PackageNotFoundError:
        pass

    # Running from a source checkout without installation
    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text(encoding="utf-8").splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.3.0"
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.0.0"

__version__ = _get_version()
__copyright__ = "Copyright 2026 quiz_toolkit contributors"
__all__: list[str] = ["__version__"]
