"""
Services package for the QoL plugin.

Hook-side services that consume the resolved Settings. Each one is handed the
Settings explicitly when it is constructed.
"""

from .base import BaseService
from .feature_service import FeatureHooks, FeaturePlan, FeatureService
from .zoom_service import ZoomService

__all__ = [
    "BaseService",
    "FeatureHooks",
    "FeaturePlan",
    "FeatureService",
    "ZoomService",
]
