"""Turnstile verification models"""
from pydantic import BaseModel
from typing import List, Optional
from enum import Enum


class VerificationFailure(str, Enum):
    """Why a Turnstile check did not pass"""
    MISSING_TOKEN = "missing_token"
    NETWORK_ERROR = "network_error"
    HTTP_STATUS = "http_status"
    MALFORMED_RESPONSE = "malformed_response"
    REJECTED = "rejected"


class VerificationResult(BaseModel):
    """Outcome of a siteverify call"""
    success: bool
    reason: Optional[VerificationFailure] = None
    error_codes: List[str] = []

    @classmethod
    def failed(cls, reason: VerificationFailure, error_codes: Optional[List[str]] = None) -> "VerificationResult":
        return cls(success=False, reason=reason, error_codes=error_codes or [])
