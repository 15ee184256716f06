"""
Materializer for generated sources.

Every run replaces the output directory wholesale: the previous tree is
removed, then each manifest entry is written. There is no rollback; if a
write fails, whatever was written so far stays on disk.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from ..manifest import Manifest

logger = logging.getLogger(__name__)


class Materializer:
    """Writes a manifest into an output directory."""

    def __init__(self, output_dir: str | Path):
        """
        Args:
            output_dir: Target directory; removed and recreated by :meth:`write`
        """
        self.output_dir = Path(output_dir)

    def write(self, manifest: Manifest) -> list[Path]:
        """
        Replace the output directory with the manifest's files.

        Args:
            manifest: Files to write, relative to the output directory

        Returns:
            Absolute paths of the written files, in manifest order

        Raises:
            OSError: If removing the old tree or writing a file fails
        """
        self.clean()
        written = []
        for generated in manifest:
            path = self.output_dir / generated.path
            self.write_file(path, generated.content)
            logger.debug("Wrote %s", path)
            written.append(path.resolve())
        logger.info("Wrote %d files to %s", len(written), self.output_dir)
        return written

    def clean(self) -> None:
        """Remove the output directory, if any, and recreate it empty."""
        if self.output_dir.exists():
            logger.debug("Removing %s", self.output_dir)
            shutil.rmtree(self.output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def write_file(path: Path, content: str) -> None:
        """Write one UTF-8 file, replacing any existing file at that path.

        The file is created with the default mode for the current umask.
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
