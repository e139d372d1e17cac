from __future__ import annotations

import json
import logging
from typing import Iterable, List, Optional

from ..core.exceptions import ValidationError
from ..leaves.model import LeaveRequest

logger = logging.getLogger(__name__)


def dump_requests(records: Iterable[LeaveRequest]) -> str:
    return json.dumps([r.to_dict() for r in records], ensure_ascii=False)


def load_requests(text: Optional[str]) -> Optional[List[LeaveRequest]]:
    """Parse a cached snapshot; malformed data counts as no data."""
    if text is None:
        return None
    try:
        payload = json.loads(text)
    except ValueError as exc:
        logger.warning("Cached leave requests are not valid JSON: %s", exc)
        return None
    if not isinstance(payload, list):
        logger.warning("Cached leave requests are not a list")
        return None
    try:
        return [LeaveRequest.from_dict(item) for item in payload]
    except ValidationError as exc:
        logger.warning("Cached leave requests are malformed: %s", exc)
        return None
