"""
MCP entry point error handling - 统一错误响应格式

Linus原则: 消除重复的try/except模式
"""

import logging
from functools import wraps
from typing import Any, Callable, Dict, cast

logger = logging.getLogger(__name__)


def handle_mcp_errors(func: Callable) -> Callable:
    """
    Tool error decorator - every tool answers with a dict carrying ``success``.

    ``error_type`` lets callers tell engine misuse (NotLoadedError) apart
    from a valid query that matched nothing.
    """

    @wraps(func)
    def wrapper(*args, **kwargs) -> Dict[str, Any]:
        try:
            result = func(*args, **kwargs)
            if isinstance(result, dict) and "success" not in result:
                result["success"] = True
            return cast(Dict[str, Any], result)
        except Exception as e:
            logger.debug("%s failed", func.__name__, exc_info=True)
            return {
                "success": False,
                "error": str(e),
                "error_type": type(e).__name__,
                "function": func.__name__,
            }

    return wrapper


def handle_mcp_resource_errors(func: Callable) -> Callable:
    """Resource error decorator - resources answer with text, so errors become text too."""

    @wraps(func)
    def wrapper(*args, **kwargs) -> str:
        try:
            return func(*args, **kwargs)
        except Exception as e:
            logger.debug("%s failed", func.__name__, exc_info=True)
            return f"Error: {e}"

    return wrapper
