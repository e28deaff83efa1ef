"""요청 로깅 미들웨어: 표준 로거 + Axiom 전송.

Request logging middleware.
Every API call is written to the ``carrental.access`` logger; when Axiom
credentials are configured the same event is shipped to Axiom as well.
Failed calls carry the domain error code from the response body.
Contact fields (email, phone) in bodies and query strings are masked,
as is any string value that looks like an email address.
"""

import json
import logging
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from carrental.config import settings

logger = logging.getLogger("carrental.access")

# 마스킹 대상 필드 패턴: Fields to mask in logged bodies
_SENSITIVE_KEYS = re.compile(r"(email|phone|token|secret|authorization)", re.IGNORECASE)

# 값 자체가 이메일인 문자열 (예: 검색어): String values that are email addresses
_EMAIL_VALUE = re.compile(r"[^\s@]+@[^\s@]+")

# 로깅 제외 경로: Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

_MAX_ERROR_LEN: int = 500


def _mask(data: Any, depth: int = 0) -> Any:
    """민감 필드 재귀 마스킹: Recursively mask sensitive fields in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(k) else _mask(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [_mask(item, depth + 1) for item in data[:20]]
    if isinstance(data, str) and _EMAIL_VALUE.search(data):
        return "***"
    return data


def _error_from_body(body: bytes) -> str:
    """오류 응답 본문에서 사유 추출: domain code first, then any detail."""
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return body.decode("utf-8", errors="replace")[:_MAX_ERROR_LEN]

    detail = payload.get("detail", payload) if isinstance(payload, dict) else payload
    if isinstance(detail, dict) and "code" in detail:
        return str(detail["code"])
    return str(detail)[:_MAX_ERROR_LEN]


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 로깅하는 미들웨어.

    Logs method, path, status and duration of every request. Bodies of
    write requests and the error code of failed responses are included.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in _SKIP_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        event: dict[str, Any] = {"method": request.method, "path": request.url.path}
        if request.query_params:
            event["query_params"] = _mask(dict(request.query_params))

        # Request body 읽기: Read body of write requests
        if request.method in ("POST", "PUT", "PATCH"):
            body_bytes = await request.body()
            if body_bytes:
                try:
                    event["request_body"] = _mask(json.loads(body_bytes))
                except (json.JSONDecodeError, UnicodeDecodeError):
                    event["request_body"] = "(non-json body)"

        status_code: int = 500
        try:
            response = await call_next(request)
            status_code = response.status_code

            if status_code >= 400:
                resp_body = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                event["error"] = _error_from_body(resp_body)

                # 소비한 body를 다시 응답으로 반환: Re-wrap consumed body
                response = Response(
                    content=resp_body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            event["status_code"] = status_code
            event["duration_ms"] = round((time.perf_counter() - start_time) * 1000, 2)
            self._emit(event)

        return response

    def _emit(self, event: dict[str, Any]) -> None:
        level = logging.WARNING if event["status_code"] >= 400 else logging.INFO
        logger.log(
            level,
            "%s %s -> %s (%sms)%s",
            event["method"],
            event["path"],
            event["status_code"],
            event["duration_ms"],
            f" error={event['error']}" if "error" in event else "",
        )

        if self._client is None:
            return
        # 전송 실패가 요청 처리에 영향주지 않도록: Shipping failures never fail the request
        try:
            self._client.ingest_events(self._dataset, [event])
        except Exception:
            logger.exception("Axiom ingest failed for %s %s", event["method"], event["path"])
