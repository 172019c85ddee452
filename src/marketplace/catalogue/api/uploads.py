"""Stores listing images on local disk under ``UPLOAD_DIR``."""

import time
from pathlib import Path

import structlog
from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool
from werkzeug.utils import secure_filename

from marketplace import settings

logger = structlog.get_logger(__name__)


def _write(target: Path, content: bytes) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(content)


async def save_image(upload: UploadFile | None) -> str | None:
    """Write the uploaded file and return its stored path, or ``None`` when nothing was sent."""
    if upload is None or not upload.filename:
        return None

    filename = secure_filename(upload.filename) or "image"
    target = Path(settings.UPLOAD_DIR) / f"{int(time.time() * 1000)}-{filename}"
    await run_in_threadpool(_write, target, await upload.read())

    logger.info("Image stored", path=str(target))
    return target.as_posix()


def discard_image(path: str | None) -> None:
    """Remove an image stored for a listing change that was rejected."""
    if path is None:
        return
    Path(path).unlink(missing_ok=True)
    logger.info("Image discarded", path=path)
