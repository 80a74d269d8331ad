"""
Email Generator

Turns a GenerationRequest into a GeneratedEmail with a single Gemini call.

Responsibilities:
- Reject blank product details before any I/O
- Build the prompt
- Request native JSON output matching the GeneratedEmail schema
- Classify failures and surface one localized GenerationError
"""

from typing import List, Optional, Union

import logfire
from pydantic import ValidationError as PydanticValidationError
from pydantic_ai import Agent, UnexpectedModelBehavior
from pydantic_ai.messages import ModelMessage, ModelResponse, TextPart
from pydantic_ai.models import Model

from config.settings import Settings, get_settings
from utils.llm_agent import create_agent, create_gemini_model

from .exceptions import GenerationError, ResponseFormatError, ValidationError
from .models import GeneratedEmail, GenerationRequest, Language
from .prompts import build_prompt


def reply_text(messages: List[ModelMessage]) -> str:
    """Raw text of the last model response in a run."""
    for message in reversed(messages):
        if isinstance(message, ModelResponse):
            return "".join(part.content for part in message.parts if isinstance(part, TextPart))
    return ""


class EmailGenerator:
    """
    Generation client for marketing emails.

    Holds no per-call state: concurrent generate() calls are independent.
    Keeping only one call pending at a time is the caller's job
    (see CampaignController).
    """

    def __init__(
        self,
        model: Optional[Union[Model, str]] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Args:
            model: Model to use instead of Gemini (tests inject a FunctionModel)
            settings: Settings override, defaults to the application singleton
        """
        self.settings = settings or get_settings()
        self._model = model

        # Configuration
        self.temperature = self.settings.generation_temperature
        self.max_tokens = self.settings.generation_max_tokens
        self.timeout = self.settings.generation_timeout

    @property
    def model_name(self) -> str:
        if self._model is None:
            return self.settings.gemini_model
        return getattr(self._model, "model_name", str(self._model))

    def _create_agent(self) -> Agent[None, GeneratedEmail]:
        model = self._model
        if model is None:
            # Raises ValueError without a credential; no request is made.
            model = create_gemini_model(self.settings.gemini_model, self.settings.gemini_api_key)

        # retries=0: one request, the first malformed reply fails the run
        return create_agent(
            model=model,
            output_type=GeneratedEmail,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            retries=0,
            timeout=self.timeout,
        )

    def _validate_request(self, request: GenerationRequest) -> None:
        language = Language(request.language)
        if not request.product_description.strip():
            raise ValidationError.missing_product_details("product_description is empty", language)
        if not request.product_url.strip():
            raise ValidationError.missing_product_details("product_url is empty", language)

    async def generate(self, request: GenerationRequest) -> GeneratedEmail:
        """
        Generate the subject and body for a product email.

        Args:
            request: Product details, language and audience options

        Returns:
            GeneratedEmail with non-empty subject and body

        Raises:
            ValidationError: product description or URL is blank (no request made)
            GenerationError: configuration, transport or response-format failure
        """
        self._validate_request(request)
        language = Language(request.language)

        with logfire.span(
            "email_generator.generate",
            model=self.model_name,
            language=language.value,
            custom_template=request.has_custom_template,
            recipient_count=request.recipient_count,
        ):
            try:
                agent = self._create_agent()
            except ValueError as e:
                logfire.error(
                    "Email generation is not configured",
                    error=str(e),
                    error_type=type(e).__name__
                )
                raise GenerationError.for_language(language) from e

            prompt = build_prompt(request)

            logfire.info(
                "Generating email with Gemini",
                model=self.model_name,
                prompt_length=len(prompt)
            )

            try:
                result = await agent.run(prompt)
                # The trimmed reply itself must be the JSON object; markdown
                # fences or surrounding prose are format errors.
                email = GeneratedEmail.model_validate_json(reply_text(result.all_messages()).strip())
            except (UnexpectedModelBehavior, PydanticValidationError) as e:
                # Reply was not JSON or did not match {subject, body}
                format_error = ResponseFormatError(f"Invalid email payload from model: {e}")
                format_error.__cause__ = e
                logfire.error(
                    "Gemini returned an invalid email payload",
                    error=str(e),
                    error_type=type(e).__name__,
                    exc_info=True
                )
                raise GenerationError.for_language(language) from format_error
            except Exception as e:
                # Transport, auth, HTTP status, timeout, rate limiting, ...
                logfire.error(
                    "Email generation request failed",
                    error=str(e),
                    error_type=type(e).__name__,
                    exc_info=True
                )
                raise GenerationError.for_language(language) from e

            logfire.info(
                "Email generated",
                subject_length=len(email.subject),
                body_length=len(email.body)
            )

            return email
