"""Client for the blog's server-side image upload endpoint."""

import os
from typing import BinaryIO, Optional, Union

import requests

from .exceptions import UploadError, with_error_handling
from .logging_config import get_logger
from .models import UploadConfig, UploadedFile, UploadResult
from .protocols import HTTPResponseProtocol, HTTPSessionProtocol, LoggerProtocol

DEFAULT_UPLOAD_ERROR = "Upload failed"

FileSource = Union[bytes, str, "os.PathLike[str]", BinaryIO]


@with_error_handling
def _read_file(file: FileSource) -> bytes:
    if isinstance(file, (bytes, bytearray)):
        return bytes(file)
    if isinstance(file, (str, os.PathLike)):
        with open(file, "rb") as handle:
            return handle.read()
    return file.read()


def _error_message(response: HTTPResponseProtocol) -> str:
    try:
        payload = response.json()
    except ValueError:
        return DEFAULT_UPLOAD_ERROR
    if isinstance(payload, dict) and payload.get("error"):
        return str(payload["error"])
    return DEFAULT_UPLOAD_ERROR


@with_error_handling
def _post_upload(
    session: HTTPSessionProtocol,
    config: UploadConfig,
    content: bytes,
    file_name: str,
) -> UploadedFile:
    response = session.post(
        config.endpoint_url,
        data={"fileName": file_name},
        files={"file": (file_name, content)},
        timeout=config.timeout,
    )
    if not response.ok:
        raise UploadError(_error_message(response), status_code=response.status_code)

    return UploadedFile.model_validate(response.json())


def upload_image(
    file: FileSource,
    file_name: str,
    config: Optional[UploadConfig] = None,
    session: Optional[HTTPSessionProtocol] = None,
    logger: Optional[LoggerProtocol] = None,
) -> UploadResult:
    """
    Upload an image through the server-side upload endpoint.

    The request is a multipart POST carrying the file bytes under ``file``
    and the desired name under ``fileName``. Failures are not raised: they
    are logged once and reported as ``UploadResult(success=False)`` with the
    server-provided message, or "Upload failed" when there is none.

    Args:
        file: Raw bytes, a path, or a binary file object
        file_name: Name to store the file under
        config: Endpoint configuration (defaults to ``UploadConfig.from_env()``)
        session: HTTP session to use (a new ``requests.Session`` if omitted)
        logger: Logger to report through

    Returns:
        UploadResult with the stored file metadata or the error message
    """
    config = config or UploadConfig.from_env()
    log = logger or get_logger("upload")

    try:
        content = _read_file(file)
        log.debug(f"Uploading {file_name!r} ({len(content)} bytes) to {config.endpoint_url}")
        if session is not None:
            uploaded = _post_upload(session, config, content, file_name)
        else:
            with requests.Session() as new_session:
                uploaded = _post_upload(new_session, config, content, file_name)
    except UploadError as exc:
        log.error(f"Image upload error for {file_name!r}: {exc.message}")
        return UploadResult(success=False, error=exc.message)

    log.info(f"Uploaded {uploaded.name!r} to {uploaded.url}")
    return UploadResult(success=True, data=uploaded)
