"""
Error response models.

Standardized error responses for the API.
"""

from pydantic import BaseModel
from typing import Optional


class ErrorResponse(BaseModel):
    """
    Standard error response format.

    ``error`` carries diagnostic detail and is only populated outside
    production.
    """

    message: str
    error: Optional[str] = None
