"""
Email generation: prompt builder and Gemini client.
"""

from generation.exceptions import GenerationError, MailerError, ResponseFormatError, ValidationError
from generation.main import EmailGenerator
from generation.models import GeneratedEmail, GenerationRequest, Language
from generation.prompts import build_prompt
from generation.utils import count_recipients

__all__ = [
    "EmailGenerator",
    "GeneratedEmail",
    "GenerationError",
    "GenerationRequest",
    "Language",
    "MailerError",
    "ResponseFormatError",
    "ValidationError",
    "build_prompt",
    "count_recipients",
]
