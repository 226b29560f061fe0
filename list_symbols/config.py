import logging
import os
from pathlib import Path
from typing import Optional

import clang.cindex

from .errors import LibclangNotFoundError

logger = logging.getLogger(__name__)

LIBRARY_FILE_ENV = "CLANG_LIBRARY_FILE"


def libclang_library_file(override: Optional[str] = None) -> Optional[str]:
    """Return the libclang path to load, or None for the bundled library."""
    return override or os.environ.get(LIBRARY_FILE_ENV) or None


def configure_libclang(override: Optional[str] = None) -> None:
    library_file = libclang_library_file(override)
    if library_file is None:
        return
    if not os.path.exists(library_file):
        raise LibclangNotFoundError(library_file)
    if clang.cindex.Config.loaded:
        logger.warning("libclang already loaded, ignoring %s", library_file)
        return
    logger.debug("using libclang from %s", library_file)
    clang.cindex.Config.set_library_file(library_file)


def default_csv_path(source: str | Path) -> Path:
    return Path(Path(source).stem + "_symbols.csv")
