"""
Utility modules for the Polyvault backend.
"""

from utils.response_models import BaseResponse, BatchResponse, HealthResponse

__all__ = [
    'BaseResponse',
    'BatchResponse',
    'HealthResponse',
]
