# lambda function handler to check if the number passed in the request body is prime or not
# answers API Gateway style events (including CORS preflight) with a JSON envelope
import json
import logging
import math
import os
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError


def _log_level(name: str) -> int:
    # unknown names fall back to INFO
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


logger = logging.getLogger(__name__)
logger.setLevel(_log_level(os.environ.get("LOG_LEVEL", "INFO")))

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

INVALID_FORMAT = "Invalid request format"
INVALID_BODY = "Invalid request body"
INVALID_NUMBER = "Invalid input. Please provide a valid number."

CORS_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}


class BadRequest(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PrimeRequest(BaseModel):
    number: StrictInt = Field(ge=INT64_MIN, le=INT64_MAX)


class PrimeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    number: int
    is_prime: bool = Field(alias="isPrime")
    message: str


class ErrorOutcome(BaseModel):
    error: str


class Envelope(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(alias="statusCode")
    headers: Dict[str, str] = Field(default_factory=lambda: dict(CORS_HEADERS))
    body: str = ""


class Preflight:
    pass


PREFLIGHT = Preflight()


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    for i in range(3, math.isqrt(n) + 1, 2):
        if n % i == 0:
            return False
    return True


def describe(number: int, prime: bool) -> str:
    if prime:
        return f"{number} is a prime number"
    return f"{number} is not a prime number"


def check_prime(number: int) -> PrimeResponse:
    prime = is_prime(number)
    return PrimeResponse(number=number, is_prime=prime, message=describe(number, prime))


def _load_event(event: Any) -> Dict[str, Any]:
    # the runtime hands over decoded dicts, raw invocations may still be text
    if isinstance(event, dict):
        return event
    if isinstance(event, (bytes, bytearray)):
        try:
            event = event.decode("utf-8")
        except ValueError:
            raise BadRequest(INVALID_FORMAT)
    if not isinstance(event, str):
        raise BadRequest(INVALID_FORMAT)
    try:
        decoded = json.loads(event)
    except (ValueError, RecursionError):
        # malformed text, oversized integer literals, runaway nesting
        raise BadRequest(INVALID_FORMAT)
    if not isinstance(decoded, dict):
        raise BadRequest(INVALID_FORMAT)
    return decoded


def parse_request(body: Any) -> PrimeRequest:
    """Decode a request body (JSON text or an already decoded object)."""
    if isinstance(body, (str, bytes, bytearray)):
        try:
            body = json.loads(body)
        except (ValueError, RecursionError):
            raise BadRequest(INVALID_NUMBER)
    try:
        return PrimeRequest.model_validate(body)
    except ValidationError as e:
        logger.debug("request validation failed: %s", e)
        raise BadRequest(INVALID_NUMBER)


def parse_event(event: Any) -> Union[Preflight, PrimeRequest]:
    """Turn a raw invocation payload into a preflight marker or a validated request.

    Raises BadRequest with one of the fixed client messages when the payload,
    its body, or the number inside it cannot be used.
    """
    payload = _load_event(event)

    if payload.get("httpMethod") == "OPTIONS":
        return PREFLIGHT

    # plain {"number": n} invocations carry the request without an HTTP wrapper
    if "number" in payload and "body" not in payload and "httpMethod" not in payload:
        return parse_request(payload)

    body = payload.get("body")
    if not isinstance(body, str):
        raise BadRequest(INVALID_BODY)
    logger.debug("request body: %s", body)

    return parse_request(body)


def success_envelope(response: PrimeResponse) -> Envelope:
    return Envelope(status_code=200, body=response.model_dump_json(by_alias=True))


def error_envelope(message: str, status_code: int = 400) -> Envelope:
    return Envelope(status_code=status_code, body=ErrorOutcome(error=message).model_dump_json())


def preflight_envelope() -> Envelope:
    return Envelope(status_code=200)


def handle(event: Any) -> Envelope:
    try:
        request = parse_event(event)
    except BadRequest as e:
        logger.warning("rejected request: %s", e.message)
        return error_envelope(e.message, e.status_code)

    if request is PREFLIGHT:
        logger.info("answered CORS preflight")
        return preflight_envelope()

    response = check_prime(request.number)
    logger.info("checked %d: prime=%s", response.number, response.is_prime)
    return success_envelope(response)


def lambda_handler(event, context: Optional[Any] = None) -> Dict[str, Any]:
    return handle(event).model_dump(by_alias=True)


def direct_handler(event, context: Optional[Any] = None) -> Dict[str, Any]:
    # typed invocation: {"number": n} in, PrimeResponse out, no envelope
    request = parse_request(_load_event(event))
    response = check_prime(request.number)
    logger.info("checked %d: prime=%s", response.number, response.is_prime)
    return response.model_dump(by_alias=True)
