"""
Model gateway: one batch of sayings in, one validated SayingRecord per saying out.

Backends from config.BACKENDS are tried in order. Mistral and OpenAI are
reached through the OpenAI SDK (Mistral via its OpenAI-compatible endpoint),
Gemini through google-genai. A call either returns exactly len(texts) records
or raises; there are never partial results.
"""

from __future__ import annotations

import json
import os
from typing import Callable

from dotenv import load_dotenv
from google import genai
from google.genai import types
from google.genai.errors import ClientError, ServerError
from openai import (
    APIConnectionError,
    APITimeoutError,
    InternalServerError,
    OpenAI,
    RateLimitError,
)
from pydantic import ValidationError
from tenacity import retry, retry_if_exception, stop_after_attempt, wait_exponential

import config
from sayings.prompts import SYSTEM_PROMPT, build_user_prompt
from sayings.schema import SayingBatch, SayingRecord

load_dotenv()

_openai_clients: dict[str, OpenAI] = {}
_gemini_client: genai.Client | None = None

_KEY_VARS = {
    "mistral": "MISTRAL_API_KEY",
    "openai": "OPENAI_API_KEY",
}


def _get_openai_client(provider: str) -> OpenAI:
    if provider not in _openai_clients:
        env_var = _KEY_VARS[provider]
        api_key = os.getenv(env_var)
        if not api_key:
            raise EnvironmentError(
                f"{env_var} is not set. "
                "Copy .env.example to .env and fill in your key."
            )
        base_url = config.MISTRAL_BASE_URL if provider == "mistral" else None
        _openai_clients[provider] = OpenAI(api_key=api_key, base_url=base_url)
    return _openai_clients[provider]


def _get_gemini_client() -> genai.Client:
    global _gemini_client
    if _gemini_client is None:
        api_key = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
        if not api_key:
            raise EnvironmentError(
                "GEMINI_API_KEY is not set. "
                "Add it to your .env file (see .env.example)."
            )
        _gemini_client = genai.Client(api_key=api_key)
    return _gemini_client


def _is_transient(exc: BaseException) -> bool:
    """Rate limits, dropped connections and server-side errors are worth another try."""
    if isinstance(exc, (RateLimitError, APIConnectionError, APITimeoutError, InternalServerError)):
        return True
    if isinstance(exc, ClientError) and exc.code == 429:
        return True
    return isinstance(exc, ServerError)


_transport_retry = retry(
    retry=retry_if_exception(_is_transient),
    wait=wait_exponential(multiplier=1, min=2, max=30),
    stop=stop_after_attempt(config.TRANSPORT_ATTEMPTS),
    reraise=True,
)


# Mistral and OpenAI both accept a JSON schema for structured output.
_RESPONSE_FORMAT = {
    "type": "json_schema",
    "json_schema": {
        "name": "SayingBatch",
        "schema": SayingBatch.model_json_schema(),
    },
}


@_transport_retry
def _call_openai_compatible(provider: str, model: str, user_message: str) -> str:
    response = _get_openai_client(provider).chat.completions.create(
        model=model,
        temperature=config.TEMPERATURE,
        response_format=_RESPONSE_FORMAT,
        messages=[
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user",   "content": user_message},
        ],
    )
    return response.choices[0].message.content or ""


@_transport_retry
def _call_gemini(provider: str, model: str, user_message: str) -> str:
    response = _get_gemini_client().models.generate_content(
        model=model,
        contents=user_message,
        config=types.GenerateContentConfig(
            system_instruction=SYSTEM_PROMPT,
            temperature=config.TEMPERATURE,
            response_mime_type="application/json",
            response_schema=SayingBatch,
        ),
    )
    return response.text or ""


_PROVIDERS: dict[str, Callable[[str, str, str], str]] = {
    "mistral": _call_openai_compatible,
    "openai": _call_openai_compatible,
    "gemini": _call_gemini,
}


def parse_batch_response(raw: str, expected: int) -> list[SayingRecord]:
    """
    Turn a raw model answer into exactly `expected` records.

    Accepts either {"sayings": [...]} or a bare JSON array, optionally wrapped
    in a markdown code fence.

    Raises:
        ValueError: on non-JSON output, schema violations or a count mismatch.
    """
    raw = raw.strip()

    # Strip markdown fences if the model wraps the object in ```json ... ```
    if raw.startswith("```"):
        raw = raw.split("```")[1]
        if raw.startswith("json"):
            raw = raw[4:]
        raw = raw.strip()

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Model returned non-JSON output:\n{raw}") from exc

    if isinstance(payload, list):
        payload = {"sayings": payload}

    try:
        batch = SayingBatch.model_validate(payload)
    except ValidationError as exc:
        raise ValueError(f"Model output does not match the sayings schema: {exc}") from exc

    if len(batch.sayings) != expected:
        raise ValueError(
            f"Record count mismatch: sent {expected}, "
            f"received {len(batch.sayings)}"
        )
    return batch.sayings


def call_model(
    texts: list[str],
    extra_instructions: str = "",
    backends: list[dict[str, str]] | None = None,
) -> list[SayingRecord]:
    """
    Analyse a batch of sayings with the first backend that succeeds.

    Args:
        texts:              Sayings in batch order.
        extra_instructions: Appended verbatim to the prompt (corrective retry).
        backends:           Override for config.BACKENDS.

    Returns:
        One SayingRecord per text, positionally aligned.

    Raises:
        The last backend's error when every backend failed.
    """
    if not texts:
        return []

    backends = config.BACKENDS if backends is None else backends
    user_message = build_user_prompt(texts, extra_instructions)

    last_error: Exception | None = None
    for backend in backends:
        provider, model = backend["provider"], backend["model"]
        try:
            print(f"Calling model: {model} for {len(texts)} sayings")
            raw = _PROVIDERS[provider](provider, model, user_message)
            return parse_batch_response(raw, len(texts))
        except Exception as exc:
            print(f"  [WARN] Error with model {model}: {exc}")
            last_error = exc

    if last_error is None:
        raise ValueError("No model backends configured.")
    raise last_error
