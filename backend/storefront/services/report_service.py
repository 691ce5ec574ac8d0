"""
Report Service - renders query results for the console log

Any result the analytics queries return (list, dict, scalar or statistics
record) is converted to plain JSON-compatible data and logged.

Author: TM3
Date: 2025-10-17
"""
import json
import logging
from datetime import date
from decimal import Decimal
from typing import Any

logger = logging.getLogger(__name__)


def _key(value: Any):
    """Dictionary keys: entities by id, everything else as a string"""
    if hasattr(value, 'to_dict') and hasattr(value, 'id'):
        return str(value.id)
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def to_reportable(value: Any) -> Any:
    """
    Convert a query result into JSON-compatible data

    - Domain models via their to_dict()
    - Decimal -> float, date -> ISO string
    - Dicts keyed by entities are keyed by entity id
    """
    if hasattr(value, 'to_dict'):
        return value.to_dict()
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, dict):
        return {_key(k): to_reportable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_reportable(v) for v in value]
    return value


def report(title: str, result: Any) -> str:
    """
    Log a titled query result

    Returns:
        The rendered result text
    """
    rendered = json.dumps(to_reportable(result), ensure_ascii=False)
    logger.info(f"{title}: {rendered}")
    return rendered
