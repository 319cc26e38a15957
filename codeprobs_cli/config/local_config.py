"""Problem marker file (.codeprob_info.json)."""

import json
from pathlib import Path
from typing import Optional
from dataclasses import dataclass

from ..errors import MarkerError

MARKER_FILENAME = ".codeprob_info.json"


@dataclass
class ProblemMarker:
    """
    Identifies which server-side problem a directory holds.
    Written by the problem repository, only ever read here.
    """

    id: int

    @classmethod
    def load(cls, directory: Optional[Path] = None) -> "ProblemMarker":
        """
        Load the marker from ``directory`` (default: current directory).
        Raises MarkerError if the file is missing or malformed.
        """
        if directory is None:
            directory = Path.cwd()
        path = directory / MARKER_FILENAME

        if not path.is_file():
            raise MarkerError(
                f"No {MARKER_FILENAME} in {directory}. "
                "Run this command from inside a problem directory."
            )

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise MarkerError(f"{path} is not valid JSON: {e}") from e
        except OSError as e:
            raise MarkerError(f"Cannot read {path}: {e}") from e

        if not isinstance(data, dict) or "id" not in data:
            raise MarkerError(f"{path} has no problem id")

        problem_id = data["id"]
        # bool is an int subclass
        if not isinstance(problem_id, int) or isinstance(problem_id, bool):
            raise MarkerError(f"{path} has a non-integer problem id: {problem_id!r}")

        return cls(id=problem_id)
