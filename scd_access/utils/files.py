"""File reading helpers."""
import logging
from pathlib import Path
from typing import Union

from ..exceptions import FileReadError

logger = logging.getLogger(__name__)


def read_text(path: Union[str, Path], encoding: str = "utf-8-sig") -> str:
    """Read the contents of a text file.

    Args:
        path: Path to the file
        encoding: Text encoding of the file (a leading UTF-8 BOM is dropped)

    Returns:
        File contents

    Raises:
        FileReadError: If the file is missing or cannot be decoded
    """
    if path is None:
        raise FileReadError("<undefined>", "Undefined file provided")

    path = Path(path)
    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Unable to read {path}: {e}")
        raise FileReadError(path.name, str(e))
