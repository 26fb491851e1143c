from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Literal, Optional

from pydantic import ValidationError

from ..config import get_settings
from .request_id import get_request_id

AuditAction = Literal[
    "purchase.completed",
    "purchase.rejected",
]

_audit_logger = logging.getLogger("audit")
_audit_logger.setLevel(logging.INFO)
if not _audit_logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    _audit_logger.addHandler(handler)
_audit_logger.propagate = False


def _enum_to_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    if hasattr(value, "value"):
        return str(value.value)
    return str(value)


def emit_audit_log(
    *,
    action: AuditAction,
    account_id: Optional[int],
    adult_count: Optional[int] = None,
    child_count: Optional[int] = None,
    infant_count: Optional[int] = None,
    total_amount: Optional[int] = None,
    total_seats: Optional[int] = None,
    error_kind: Any = None,
    message: Optional[str] = None,
    extra: Optional[dict[str, Any]] = None,
) -> None:
    """Emit structured JSON audit log. Raises RuntimeError if settings or logging fail."""
    try:
        settings = get_settings()
    except ValidationError as exc:
        raise RuntimeError("invalid audit log settings") from exc
    if not settings.audit_log_enabled:
        return

    level = logging.INFO if action == "purchase.completed" else logging.WARNING
    payload: dict[str, Any] = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "level": logging.getLevelName(level).lower(),
        "service": settings.service_name,
        "action": action,
        "request_id": get_request_id(),
        "account_id": account_id,
        "adult_count": adult_count,
        "child_count": child_count,
        "infant_count": infant_count,
        "total_amount": total_amount,
        "total_seats": total_seats,
        "error_kind": _enum_to_str(error_kind),
    }
    if message is not None:
        payload["message"] = message
    if extra:
        payload.update(extra)

    # Drop None values to keep the log compact.
    compact_payload = {k: v for k, v in payload.items() if v is not None}
    try:
        _audit_logger.log(level, json.dumps(compact_payload, ensure_ascii=True))
    except Exception as exc:
        raise RuntimeError("failed to emit audit log") from exc
