# SPDX-License-Identifier: MIT

import logging
from pathlib import Path

from daysheet.errors import SheetExistsError, SheetIOError, SheetNotFoundError

logger = logging.getLogger(__name__)


class SheetRepository:
    def read(self, path: Path) -> str:
        logger.debug(f"Reading sheet {path}")
        try:
            return path.read_text()
        except FileNotFoundError:
            raise SheetNotFoundError(f"Sheet '{path}' does not exist")
        except IsADirectoryError:
            raise SheetIOError(f"Sheet '{path}' is a directory")
        except OSError as e:
            raise SheetIOError(f"Could not read sheet '{path}': {e.strerror}")

    def create(self, path: Path, text: str) -> None:
        """Write a new sheet, refusing to replace an existing file."""
        logger.debug(f"Creating sheet {path}")
        try:
            with path.open("x") as sheet_file:
                sheet_file.write(text)
        except FileExistsError:
            raise SheetExistsError(f"Sheet '{path}' already exists")
        except FileNotFoundError:
            raise SheetIOError(f"Directory '{path.parent}' does not exist")
        except OSError as e:
            raise SheetIOError(f"Could not write sheet '{path}': {e.strerror}")


SHEET_REPO = SheetRepository()
