"""
Exceptions raised by the email generator.

Only ValidationError and GenerationError reach callers. Both carry a short,
localized ``user_message`` that is safe to show in the UI; the underlying
cause stays on ``__cause__`` and in the logs.
"""

from typing import Optional

from generation.models import Language


GENERATION_FAILED_MESSAGES = {
    Language.AR: "فشل في إنشاء محتوى البريد الإلكتروني. يرجى المحاولة مرة أخرى.",
    Language.EN_US: "Failed to generate email content. Please try again.",
}

MISSING_INPUT_MESSAGES = {
    Language.AR: "وصف المنتج ورابط المنتج مطلوبان.",
    Language.EN_US: "Product description and URL are required.",
}

BLANK_DRAFT_MESSAGES = {
    Language.AR: "يجب ألا يكون عنوان البريد الإلكتروني أو محتواه فارغًا.",
    Language.EN_US: "Email subject and body cannot be empty.",
}


class MailerError(Exception):
    """Base exception for the campaign mailer."""
    pass


class ValidationError(MailerError):
    """
    Raised when required input is missing.

    Always raised before any request is sent, so the caller can fix the input
    and try again.
    """

    def __init__(self, reason: str, user_message: str):
        self.reason = reason
        self.user_message = user_message
        super().__init__(reason)

    @classmethod
    def missing_product_details(cls, reason: str, language: Language = Language.AR) -> "ValidationError":
        return cls(reason, MISSING_INPUT_MESSAGES[language])

    @classmethod
    def blank_draft(cls, language: Language = Language.AR) -> "ValidationError":
        return cls("subject and body must be non-empty", BLANK_DRAFT_MESSAGES[language])


class ResponseFormatError(MailerError):
    """
    Raised when Gemini answered but the payload is not JSON or does not
    contain non-empty string fields subject and body.

    Never surfaced directly: EmailGenerator wraps it in GenerationError.
    """
    pass


class GenerationError(MailerError):
    """
    The single failure type for a generation attempt: transport, auth,
    rate limiting, timeouts, missing credentials and malformed replies.

    ``str(error)`` is the user-facing message; it never contains the raw
    service error.
    """

    def __init__(self, user_message: str):
        self.user_message = user_message
        super().__init__(user_message)

    @classmethod
    def for_language(cls, language: Optional[Language] = None) -> "GenerationError":
        return cls(GENERATION_FAILED_MESSAGES[language or Language.AR])
