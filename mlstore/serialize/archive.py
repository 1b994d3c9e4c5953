"""Shape check shared by the model archive readers."""

from typing import Any, Dict

from ..errors import DecodingFailure


def check_archive(archive: Any, path) -> Dict[str, Dict[str, Any]]:
    """
    Verify that *archive* maps names to ``{"tag": str, "state": ...}`` entries.

    Raises
    ------
    DecodingFailure
        If the structure does not match.
    """
    if not isinstance(archive, dict):
        raise DecodingFailure(f"'{path}' does not hold a model archive")
    for name, entry in archive.items():
        if not isinstance(entry, dict) or not isinstance(entry.get("tag"), str):
            raise DecodingFailure(f"Malformed entry '{name}' in '{path}'")
        if "state" not in entry:
            raise DecodingFailure(f"Entry '{name}' in '{path}' has no state")
    return archive
