"""API routes for generating and decoding identifiers."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse

from core.errors import InvalidInputError
from timeid.codec import decode_encoded_timestamp, encode_timestamp_now
from timeid.identifier import decode_identifier, new_identifier
from timeid.randomness import clamp_length
from utils.timestamp import format_timestamp, now_millis
from ui.auth import verify_basic_auth

router = APIRouter(prefix="/api/v1", tags=["api"])

# These will be set by app.py
_prng = None
_generator_config = None
_issued = 0


def init(prng, generator_config):
    """Initialize with the app's generator and its config."""
    global _prng, _generator_config, _issued
    _prng = prng
    _generator_config = generator_config
    _issued = 0


def _invalid(exc):
    return JSONResponse(content=exc.to_dict(), status_code=status.HTTP_400_BAD_REQUEST)


@router.get("/ids")
async def new_ids(
    count: int = Query(1, ge=1),
    length: Optional[int] = None,
    delimiter: Optional[str] = None,
    time: Optional[int] = None,
):
    """Generate one or more identifiers sharing a timestamp."""
    global _issued
    if count > _generator_config.max_batch:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                            detail=f"count exceeds max_batch={_generator_config.max_batch}")
    length = _generator_config.suffix_length if length is None else length
    delimiter = _generator_config.delimiter if delimiter is None else delimiter
    millis = now_millis() if time is None else time
    try:
        ids = [new_identifier(millis, length, delimiter, _prng) for _ in range(count)]
    except InvalidInputError as exc:
        return _invalid(exc)
    _issued += len(ids)
    return {"ids": ids, "time": millis, "suffix_length": clamp_length(length)}


@router.get("/ids/{value}")
async def decode_id(value: str, delimiter: Optional[str] = None):
    """Split an identifier into timestamp, date and randomness."""
    delimiter = _generator_config.delimiter if delimiter is None else delimiter
    parsed = decode_identifier(value, delimiter)
    if parsed is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="not a decodable identifier")
    return parsed.to_dict()


@router.get("/timestamps/encode")
async def encode(time: Optional[int] = None):
    """Encode milliseconds since epoch (now when omitted)."""
    try:
        encoded = encode_timestamp_now(time)
    except InvalidInputError as exc:
        return _invalid(exc)
    encoded_time = decode_encoded_timestamp(encoded).time
    requested = encoded_time if time is None else time
    return {"encoded": encoded, "time": requested, "encoded_time": encoded_time, "wrapped": requested != encoded_time}


@router.get("/timestamps/{text}")
async def decode(text: str):
    """Decode the timestamp at the start of text."""
    timestamp = decode_encoded_timestamp(text)
    if timestamp is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="not a decodable timestamp")
    date = timestamp.date
    return {"time": timestamp.time, "encoded": timestamp.encoded, "date": date.isoformat() if date else None}


@router.get("/stats")
async def stats(username=Depends(verify_basic_auth)):
    """Return generator statistics (requires basic auth)."""
    return {
        "timestamp": format_timestamp(),
        "generator": {
            "draws": _prng.draws,
            "issued": _issued,
            "suffix_length": clamp_length(_generator_config.suffix_length),
            "delimiter": _generator_config.delimiter,
            "seeded": _generator_config.seed is not None,
        },
    }
