from __future__ import annotations

import io
import json
import logging
from typing import Any, BinaryIO, Callable, Iterator, Optional, Union

import httpx

from formreader.utils.files import guess_content_type

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int], None]


class UploadError(Exception):
    """Raised when the upload fails: transport error, non-2xx status or unparsable body."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UploadBusyError(RuntimeError):
    """Raised when ``submit`` is called while another upload is in flight."""


class _ProgressStream(httpx.SyncByteStream):
    """Wrap a request body stream and report bytes sent after each chunk."""

    def __init__(self, stream: httpx.SyncByteStream, total: int, advance: Callable[[int, int], None]) -> None:
        self._stream = stream
        self._total = total
        self._advance = advance

    def __iter__(self) -> Iterator[bytes]:
        sent = 0
        for chunk in self._stream:
            sent += len(chunk)
            if self._total:
                self._advance(sent, self._total)
            yield chunk

    def close(self) -> None:
        self._stream.close()


def parse_result_body(response: httpx.Response) -> Any:
    """Decode the response body; a JSON-encoded string gets one more parse step."""
    try:
        data = response.json()
        if isinstance(data, str):
            data = json.loads(data)
    except ValueError as e:
        raise UploadError(f"Invalid JSON in response: {e}") from e
    return data


class Uploader:
    """Single-slot upload client for the OCR extraction endpoint.

    ``progress`` is the percentage of the request body sent so far. It never
    decreases during one upload, ends at 100 on success and drops back to 0
    when the upload fails.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 120.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.url = url
        self.progress = 0
        self._timeout = httpx.Timeout(timeout)
        self._transport = transport
        self._busy = False
        self._on_progress: Optional[ProgressCallback] = None

    @property
    def busy(self) -> bool:
        return self._busy

    def submit(
        self,
        file_name: str,
        content: Union[bytes, BinaryIO],
        content_type: Optional[str] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> Any:
        """POST one file as multipart part ``file`` and return the parsed result."""
        if self._busy:
            raise UploadBusyError("An upload is already in progress")

        self._busy = True
        self._on_progress = on_progress
        self.progress = 0
        try:
            result = self._send(file_name, content, content_type or guess_content_type(file_name))
            self._advance(1, 1)
        except UploadError as e:
            logger.warning("Upload of %s failed: %s", file_name, e)
            self.progress = 0
            raise
        finally:
            self._busy = False
            self._on_progress = None

        logger.info("Upload of %s complete", file_name)
        return result

    def _send(self, file_name: str, content: Union[bytes, BinaryIO], content_type: str) -> Any:
        if isinstance(content, (bytes, bytearray)):
            # Raw bytes go out as one chunk; a file object is read in chunks
            content = io.BytesIO(content)
        files = {"file": (file_name, content, content_type)}
        with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
            try:
                request = client.build_request("POST", self.url, files=files)
                total = int(request.headers.get("Content-Length", 0))
                logger.info("Uploading %s (%d bytes) to %s", file_name, total, self.url)
                request.stream = _ProgressStream(request.stream, total, self._advance)
                response = client.send(request)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                code = e.response.status_code
                raise UploadError(f"Request failed with status code {code}", status_code=code) from e
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                raise UploadError(str(e) or e.__class__.__name__) from e
            return parse_result_body(response)

    def _advance(self, sent: int, total: int) -> None:
        percent = min(100, max(self.progress, round(sent * 100 / total)))
        if percent == self.progress:
            return
        self.progress = percent
        if self._on_progress is not None:
            self._on_progress(percent)
