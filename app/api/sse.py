import json
from collections.abc import Generator, Iterator

from app.processor.events import Event

SSE_MEDIA_TYPE = "text/event-stream"
SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "X-Accel-Buffering": "no",
}


def encode_event(event: Event) -> str:
    """Format one event as a Server-Sent Events ``data:`` frame."""
    return f"data: {json.dumps(event, ensure_ascii=False)}\n\n"


def encode_events(events: Generator[Event, None, None]) -> Iterator[str]:
    try:
        for event in events:
            yield encode_event(event)
    finally:
        # Closing propagates a client disconnect into the pipeline.
        events.close()
