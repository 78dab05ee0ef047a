"""Targets that a rendered report is handed to for printing or sharing."""

import logging
import os
import re
import tempfile
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path

from triplog.errors import ExportError

logger = logging.getLogger(__name__)


class ReportSharer(ABC):
    @abstractmethod
    def share(self, html: str, title: str) -> str:
        """Deliver the document and return where it ended up."""


def _slug(title: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-") or "report"


class FileReportSharer(ReportSharer):
    """Writes reports as HTML files into a directory.

    The file is written to a temporary name and renamed into place, so a
    failed export never leaves a partial document behind.
    """

    def __init__(self, output_dir: str | Path):
        self._output_dir = Path(output_dir)

    def _target_path(self, title: str) -> Path:
        stamp = datetime.now().strftime("%Y%m%d-%H%M%S")
        return self._output_dir / f"{_slug(title)}-{stamp}.html"

    def share(self, html: str, title: str) -> str:
        target = self._target_path(title)
        tmp_name = None
        written = False
        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._output_dir, prefix=".", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(html)
            os.replace(tmp_name, target)
            written = True
        except (OSError, ValueError) as e:
            raise ExportError(f"Writing report to {target} failed: {e}") from e
        finally:
            if not written and tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        logger.info("Report written to %s", target)
        return str(target)


def get_report_sharer() -> ReportSharer:
    from triplog.config import get_config

    return FileReportSharer(get_config().report_dir)
