"""Frame scheduling: scene passes, priority and dynamic element monitoring.

Python 3.13+. Zero external dependencies.
"""

from .driver import RECOGNIZED_SCENES, SceneDriver, SceneHost, is_dynamic_path, is_priority_path
from .throttle import IntervalGate

__all__ = [
    "RECOGNIZED_SCENES",
    "IntervalGate",
    "SceneDriver",
    "SceneHost",
    "is_dynamic_path",
    "is_priority_path",
]
