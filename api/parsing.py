"""
Request body helpers shared by the API views.
"""

import logging
from typing import Any, Dict

from django.http import QueryDict
from rest_framework.exceptions import ParseError, UnsupportedMediaType
from rest_framework.request import Request

logger = logging.getLogger(__name__)


def read_json_object(request: Request) -> Dict[str, Any]:
    """
    Return the decoded JSON body as a dict.

    Malformed or unsupported bodies and non-object JSON are treated as an empty body.

    Args:
        request: DRF request

    Returns:
        Body mapping, possibly empty
    """
    try:
        data = request.data
    except (ParseError, UnsupportedMediaType) as e:
        logger.warning(
            "Unreadable request body",
            extra={"path": request.path, "error": str(e.detail)},
        )
        return {}
    if isinstance(data, QueryDict):
        return data.dict()
    if not isinstance(data, dict):
        return {}
    return data
