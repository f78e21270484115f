"""
Session component - persisted login state and start route selection.
"""

from .component import SessionState, resolve_start_route
from .ports import ScalarStorePort

__all__ = [
    "SessionState",
    "resolve_start_route",
    "ScalarStorePort",
]
