"""Submission templates

A template decides which fields and consents a submission needs and how it
is laid out in the Telegram message. Labels, bullets and emoji written here
are MarkdownV2 on purpose and are never escaped; everything taken from the
submission goes through escape_markdown_v2.
"""
from typing import Dict, List, Optional, Tuple
import logging

from formrelay.exceptions import ConfigurationError, ValidationError
from formrelay.models.submission import Submission
from formrelay.services.markdown import escape_markdown_v2

logger = logging.getLogger(__name__)

BANNER = "*새로운 입사 지원이 도착했습니다* 🚀"

CONSENT_LABELS = {
    "privacy_agree": "개인정보처리방침",
    "third_party_agree": "제3자 제공/활용",
    "marketing_agree": "마케팅 수신",
}


def text_length(text: str) -> int:
    """Length in UTF-16 code units, the way the browser form counts it"""
    return len(text.encode("utf-16-le")) // 2


class SubmissionTemplate:
    """Base template: name and contact required, privacy consent required"""

    name = "base"
    required_fields: Tuple[str, ...] = ("name", "contact")
    required_consents: Tuple[str, ...] = ("privacy_agree",)
    displayed_consents: Tuple[str, ...] = ("privacy_agree", "third_party_agree", "marketing_agree")
    max_field_length: Optional[int] = None

    def validate(self, submission: Submission) -> None:
        """Raise ValidationError for the first problem found"""
        values = [getattr(submission, field) for field in self.required_fields]

        if not all(values):
            raise ValidationError("필수 입력값이 누락되었습니다.")

        if self.max_field_length is not None and any(text_length(v) > self.max_field_length for v in values):
            raise ValidationError("입력값이 너무 깁니다.")

        if not all(submission.consented(field) for field in self.required_consents):
            raise ValidationError("필수 약관에 동의해야 합니다.")

    def render(self, submission: Submission) -> str:
        """Build the MarkdownV2 message text"""
        sections = [[BANNER], self.applicant_lines(submission), self.consent_lines(submission)]
        sections.extend(self.extra_sections(submission))
        return "\n\n".join("\n".join(lines) for lines in sections if lines)

    def applicant_lines(self, submission: Submission) -> List[str]:
        return [
            f"*이름:* {escape_markdown_v2(submission.name)}",
            f"*연락처:* {escape_markdown_v2(submission.contact)}",
        ]

    def consent_lines(self, submission: Submission) -> List[str]:
        return [
            f"*{CONSENT_LABELS[field]}:* {submission.consent_label(field)}"
            for field in self.displayed_consents
        ]

    def extra_sections(self, submission: Submission) -> List[List[str]]:
        return []


class ApplicationTemplate(SubmissionTemplate):
    """Plain application form with a 50 character cap and third-party consent"""

    name = "application"
    required_consents = ("privacy_agree", "third_party_agree")
    max_field_length = 50


class TrackedApplicationTemplate(SubmissionTemplate):
    """Landing page form that also reports ad tracking parameters and scroll depth"""

    name = "tracked"

    def applicant_lines(self, submission: Submission) -> List[str]:
        lines = super().applicant_lines(submission)
        if submission.application_type:
            lines.append(f"*지원 분야:* {escape_markdown_v2(submission.application_type)}")
        return lines

    def extra_sections(self, submission: Submission) -> List[List[str]]:
        if submission.url_params:
            tracking = ["*유입 정보:*"] + [
                f"• {escape_markdown_v2(key)}: {escape_markdown_v2(value)}"
                for key, value in submission.url_params.items()
            ]
        else:
            tracking = ["*유입 정보:* 없음"]

        if submission.scroll_depth:
            scroll = f"*스크롤 깊이:* {escape_markdown_v2(submission.scroll_depth)}%"
        else:
            scroll = "*스크롤 깊이:* 알 수 없음"

        return [tracking, [scroll]]


TEMPLATES: Dict[str, SubmissionTemplate] = {
    template.name: template
    for template in (ApplicationTemplate(), TrackedApplicationTemplate())
}


def get_template(name: str) -> SubmissionTemplate:
    """Look up a registered template by name"""
    template = TEMPLATES.get(name)
    if template is None:
        logger.error(f"CRITICAL: Unknown submission template '{name}'")
        raise ConfigurationError()
    return template
