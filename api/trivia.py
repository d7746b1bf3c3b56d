"""
Trivia Stream Handler

Forwards a trivia prompt to the upstream model and relays its event-stream
back to the caller unchanged.

Lifecycle:
  validate -> open upstream stream -> read first chunk -> relay chunks -> close

Error exits:
  - missing API key            -> 500 {"error": "Server configuration error."}
  - blank/invalid topic        -> 400 {"error": "Topic is required."}
  - upstream fails before its
    first byte is relayed      -> 500 {"error": "Failed to fetch trivia data."}
  - upstream fails mid-stream  -> logged, connection aborted (headers already sent)
"""

import logging
from typing import AsyncIterator, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import BaseModel, ValidationError
from starlette.background import BackgroundTask

from api.dependencies import get_upstream_client
from api.errors import (
    TRIVIA_FAILURE_MESSAGE,
    ClientInputError,
    ServerConfigurationError,
)
from inference import ChatStream, UpstreamClient, UpstreamError, UpstreamHttpError
from prompting import build_trivia_prompt

# Setup logging
logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api", tags=["trivia"])

EVENT_STREAM_MEDIA_TYPE = "text/event-stream"


class TriviaRequest(BaseModel):
    topic: Optional[str] = None


async def parse_trivia_request(request: Request) -> TriviaRequest:
    """
    Read the JSON body into a TriviaRequest.

    An empty body counts as a missing topic. Unparseable JSON or a body of
    the wrong shape is a client error with the same 400 as a missing topic.
    """
    raw = await request.body()
    if not raw.strip():
        return TriviaRequest()

    try:
        return TriviaRequest.model_validate_json(raw)
    except ValidationError as e:
        logger.info(f"Rejected trivia request body: {e.error_count()} validation error(s)")
        raise ClientInputError() from e


def _upstream_failure(e: UpstreamError) -> JSONResponse:
    if isinstance(e, UpstreamHttpError):
        logger.error(f"Upstream API error ({e.status_code}): {e.body}")
    else:
        logger.error(f"Error fetching trivia: {e}")
    return JSONResponse(status_code=500, content={"error": TRIVIA_FAILURE_MESSAGE})


async def relay_stream(
    stream: ChatStream,
    chunks: Optional[AsyncIterator[bytes]] = None,
    first_chunk: bytes = b"",
) -> AsyncIterator[bytes]:
    """
    Forward upstream chunks in order, byte for byte.

    `chunks` may be an iterator the caller already advanced; `first_chunk`
    is then the chunk it pulled, relayed before the rest.

    Closing this generator early (client disconnect) closes the upstream
    response too. A mid-stream upstream failure is re-raised so the server
    drops the connection instead of writing a second response.
    """
    if chunks is None:
        chunks = stream.iter_chunks()
    try:
        if first_chunk:
            yield first_chunk
        async for chunk in chunks:
            yield chunk
    except UpstreamError as e:
        logger.error(f"Trivia stream interrupted: {e}")
        raise
    finally:
        await stream.aclose()


@router.post("/trivia")
async def generate_trivia(
    request: Request,
    client: UpstreamClient = Depends(get_upstream_client),
):
    """
    Stream trivia for a topic.

    Expected payload:
    {
        "topic": "volcanoes"
    }

    Returns:
        text/event-stream relayed verbatim from the upstream model
    """
    if not client.is_configured:
        logger.error("API key is not configured.")
        raise ServerConfigurationError()

    payload = await parse_trivia_request(request)
    topic = payload.topic or ""
    if not topic.strip():
        raise ClientInputError()

    logger.info(f"Generating trivia for topic: {topic.strip()[:50]}")

    try:
        stream = await client.stream_chat(build_trivia_prompt(topic))
    except UpstreamError as e:
        return _upstream_failure(e)

    # Nothing is committed to the caller until the first upstream byte is in
    chunks = stream.iter_chunks()
    try:
        first_chunk = await chunks.__anext__()
    except StopAsyncIteration:
        first_chunk = b""
    except UpstreamError as e:
        await stream.aclose()
        return _upstream_failure(e)

    return StreamingResponse(
        relay_stream(stream, chunks, first_chunk),
        media_type=EVENT_STREAM_MEDIA_TYPE,
        # Runs even when the client disconnects before the first chunk is sent
        background=BackgroundTask(stream.aclose),
    )
