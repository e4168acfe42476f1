"""Submission pipeline errors

Every error carries the user-facing message and the HTTP status the
submit endpoint answers with.
"""

GENERIC_ERROR_MESSAGE = "서버에서 알 수 없는 오류가 발생했습니다."


class SubmissionError(Exception):
    """Base class for errors surfaced to the submitter"""
    status_code = 500
    default_message = GENERIC_ERROR_MESSAGE

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ConfigurationError(SubmissionError):
    """Required secrets are missing or the submission template is unknown"""
    default_message = "서버 설정에 문제가 발생했습니다. 관리자에게 문의하세요."


class CaptchaError(SubmissionError):
    """Turnstile token missing or rejected"""
    status_code = 403
    default_message = "비정상적인 접근입니다. (CAPTCHA 실패)"


class ValidationError(SubmissionError):
    """Missing, over-length or unconsented form input

    The status code is decided by the caller (see Settings.validation_error_status).
    """


class RelayError(SubmissionError):
    """Telegram rejected the message or could not be reached"""
    default_message = "텔레그램 API 오류가 발생했습니다."
