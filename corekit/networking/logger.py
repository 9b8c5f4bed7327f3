"""Request/response tracing for the request engine.

``NetworkLogger.log_request`` is an ``httpx`` request hook that logs the
method, URL and a cURL reproduction. ``log_response`` is called by the request
engine once the body has been read, so tracing never touches the response
stream. Tracing is side-effect only, so any failure inside it is contained.
"""

from __future__ import annotations

import json
import logging
import time

import httpx

logger = logging.getLogger(__name__)

_CURL_SEPARATOR = " \\\n\t"

# Request extension key holding the monotonic send time
_STARTED_AT = "corekit.started_at"


def curl_command(request: httpx.Request) -> str:
    """Build a cURL command that reproduces ``request``.

    Header names keep the casing they were set with.
    """
    components = ["curl -v", f"-X {request.method}"]
    encoding = request.headers.encoding
    for name, value in request.headers.raw:
        components.append(f'-H "{name.decode(encoding)}: {value.decode(encoding)}"')

    body = request.content
    if body:
        try:
            components.append(f"-d '{body.decode('utf-8')}'")
        except UnicodeDecodeError:
            pass  # binary bodies are not reproducible on the command line

    components.append(f'"{request.url}"')
    return _CURL_SEPARATOR.join(components)


def format_body(content: bytes) -> str:
    """Render a response body for the trace: pretty JSON, raw text, or a marker."""
    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError:
        return "Non-UTF8 Data"
    try:
        return json.dumps(json.loads(text), indent=2, ensure_ascii=False)
    except ValueError:
        return text


class NetworkLogger:
    """Traces requests and responses when enabled."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    @property
    def event_hooks(self) -> dict[str, list]:
        """Hooks in the shape ``httpx.AsyncClient(event_hooks=...)`` expects."""
        return {"request": [self.log_request]}

    async def log_request(self, request: httpx.Request) -> None:
        if not self.enabled:
            return
        try:
            request.extensions[_STARTED_AT] = time.monotonic()
            logger.debug(
                "[REQUEST]: %s %s\ncURL:\n%s",
                request.method,
                request.url,
                curl_command(request),
                extra={"method": request.method, "url": str(request.url)},
            )
        except Exception:
            logger.debug("Failed to trace request", exc_info=True)

    def log_response(self, response: httpx.Response) -> None:
        """Trace a response whose body has already been read."""
        if not self.enabled:
            return
        try:
            request = response.request
            extra = {
                "method": request.method,
                "url": str(request.url),
                "status_code": response.status_code,
            }
            started_at = request.extensions.get(_STARTED_AT)
            if started_at is not None:
                extra["duration_ms"] = round((time.monotonic() - started_at) * 1000, 2)
            logger.debug(
                "[RESPONSE]: %s\nData: %s",
                request.url,
                format_body(response.content),
                extra=extra,
            )
        except Exception:
            logger.debug("Failed to trace response", exc_info=True)
