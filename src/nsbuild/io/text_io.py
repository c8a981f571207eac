"""Text write helpers with atomic persistence."""

from __future__ import annotations

import functools
import os
import tempfile
from contextlib import suppress
from pathlib import Path

from nsbuild.constants.engine import TEXT_TEMP_PREFIX, TEXT_TEMP_SUFFIX


def write_text_atomic(
    *,
    path: Path,
    content: str,
    temp_prefix: str = TEXT_TEMP_PREFIX,
    temp_suffix: str = TEXT_TEMP_SUFFIX,
) -> None:
    """Persist text atomically by writing to a temp file then renaming."""
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
            newline="",
        ) as handle:
            temp_name = handle.name
            handle.write(content)
        os.chmod(temp_name, _default_file_mode())
    except Exception:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise

    assert temp_name is not None
    os.replace(temp_name, path)


@functools.cache
def _default_file_mode() -> int:
    """Mode of a newly created regular file under the process umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask

