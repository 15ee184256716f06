"""
In-memory manifest of generated files.

Every emission stage returns its files as a list of GeneratedFile; the
generator concatenates them and hands the result once to the materializer.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath


@dataclass(frozen=True)
class GeneratedFile:
    """A generated text file, addressed relative to the output directory."""

    path: PurePosixPath
    content: str

    @staticmethod
    def of(path: str, content: str) -> GeneratedFile:
        return GeneratedFile(path=PurePosixPath(path), content=content)


Manifest = list[GeneratedFile]
