"""Resolve handler secrets mounted as files (Docker secret convention)."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)

SECRET_VARIABLES = ("HANDLER_ACCESS_KEY", "HANDLER_CERTIFICATE")


def load_secret_file_variables(names: Iterable[str] = SECRET_VARIABLES) -> None:
    """
    Expose the content of ``<NAME>_FILE`` as ``<NAME>``.

    A variable that is already set wins over its file. Unreadable files are
    logged and skipped; the settings layer then falls back to its defaults.
    """

    for name in names:
        if os.environ.get(name):
            continue
        file_path = os.environ.get(f"{name}_FILE")
        if not file_path:
            continue
        try:
            value = Path(file_path).read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            logger.warning(
                "env.secret_file.missing",
                extra={"variable": name, "path": file_path, "error": str(exc)},
            )
            continue
        except UnicodeDecodeError as exc:
            logger.warning(
                "env.secret_file.decode_failed",
                extra={"variable": name, "path": file_path, "error": str(exc)},
            )
            continue
        except OSError as exc:
            logger.warning(
                "env.secret_file.load_failed",
                extra={"variable": name, "path": file_path, "error": str(exc)},
            )
            continue

        # PEM bundles keep their inner newlines, only the trailing one goes
        os.environ[name] = value.strip()
