"""Utilities for creating instrumented pydantic-ai agents backed by Gemini."""

import logging
from typing import Optional, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic_ai import Agent, NativeOutput
from pydantic_ai.models import Model
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.providers.google import GoogleProvider

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Union[BaseModel, str])


def _resolve_output_type(output_type: Optional[Type[T]]):
    if output_type is None or output_type is str:
        return str
    if issubclass(output_type, BaseModel):
        # Native structured output: the provider receives
        # response_mime_type=application/json plus the model's JSON schema.
        return NativeOutput(output_type)
    raise ValueError(
        f"output_type must be str or a Pydantic BaseModel subclass, got {output_type}"
    )


def create_gemini_model(model_name: str, api_key: str) -> GoogleModel:
    """Build a Gemini model bound to an explicit API key."""
    if not api_key or not api_key.strip():
        raise ValueError("Gemini API key is not configured")
    return GoogleModel(model_name, provider=GoogleProvider(api_key=api_key))


def create_agent(
    model: Union[Model, str],
    output_type: Optional[Type[T]] = None,
    system_prompt: Optional[str] = None,
    temperature: float = 0.7,
    max_tokens: int = 2000,
    retries: int = 2,
    timeout: Optional[float] = None,
) -> Agent[None, T]:
    """Create a pydantic-ai Agent with optional structured output validation.

    ``retries`` is the output-validation budget. With ``retries=0`` the agent
    makes exactly one model request and raises on the first invalid reply.
    """
    resolved_output_type = _resolve_output_type(output_type)

    model_settings = {
        "temperature": temperature,
        "max_tokens": max_tokens,
    }
    if timeout is not None:
        model_settings["timeout"] = timeout

    agent = Agent(
        model=model,
        output_type=resolved_output_type,
        system_prompt=system_prompt or (),
        retries=retries,
        model_settings=model_settings,
    )

    logger.debug(
        "Created agent: model=%s, output_type=%s, temperature=%s, max_tokens=%s, retries=%s, timeout=%s",
        getattr(model, "model_name", model),
        getattr(output_type, "__name__", "str"),
        temperature,
        max_tokens,
        retries,
        timeout,
    )

    return agent
