"""Submission-related Pydantic models"""
from pydantic import BaseModel, field_validator
from typing import Any, Dict, Mapping, Optional
from urllib.parse import parse_qsl
import json

# Value browsers send for a checked checkbox without an explicit value
AFFIRMATIVE = "on"


class Submission(BaseModel):
    """Job application form submission"""
    name: str = ""
    contact: str = ""
    privacy_agree: Optional[str] = None
    third_party_agree: Optional[str] = None
    marketing_agree: Optional[str] = None
    application_type: Optional[str] = None
    scroll_depth: Optional[str] = None
    url_params: Dict[str, str] = {}

    @field_validator("url_params", mode="before")
    @classmethod
    def parse_url_params(cls, v: Any) -> Dict[str, str]:
        if v is None:
            return {}
        if isinstance(v, Mapping):
            return {str(key): "" if value is None else str(value) for key, value in v.items()}
        if not isinstance(v, str) or not v.strip():
            return {}

        raw = v.strip()
        try:
            parsed = json.loads(raw)
        except ValueError:
            # Not JSON, treat it as the landing page query string
            return dict(parse_qsl(raw.lstrip("?"), keep_blank_values=True))

        if isinstance(parsed, dict):
            return {str(key): "" if value is None else str(value) for key, value in parsed.items()}
        return {}

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "Submission":
        """Build a submission from inbound form data, ignoring unknown fields"""
        fields = {}
        for field_name in cls.model_fields:
            value = form.get(field_name)
            if value is None:
                continue
            fields[field_name] = value if field_name == "url_params" else str(value)
        return cls(**fields)

    def consented(self, field_name: str) -> bool:
        """True only for the exact checkbox marker"""
        return getattr(self, field_name) == AFFIRMATIVE

    def consent_label(self, field_name: str) -> str:
        return "동의 ✅" if getattr(self, field_name) else "비동의 ❌"


class SubmitResponse(BaseModel):
    """Submit endpoint response"""
    message: str
