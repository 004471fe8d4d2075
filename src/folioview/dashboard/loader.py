"""Load the five dashboard documents concurrently.

A resource that cannot be fetched, parsed or validated comes back as
``None`` in its slot. The load step as a whole fails only when no remote
document produced an HTTP response at all (the network or host is down),
or when something other than a per-document failure goes wrong.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Optional

import aiohttp
from pydantic import TypeAdapter, ValidationError

from folioview.models import DashboardData, Decision, Position, Snapshot, Summary, Thesis

logger = logging.getLogger(__name__)

DEFAULT_BASE = "data/"
DEFAULT_TIMEOUT = 10.0

SUMMARY_FILE = "summary.json"
SNAPSHOTS_FILE = "snapshots.json"
POSITIONS_FILE = "positions.json"
DECISIONS_FILE = "decisions.json"
THESES_FILE = "theses.json"

# DashboardData slot -> (document name, validator)
RESOURCES: dict[str, tuple[str, TypeAdapter]] = {
    "summary": (SUMMARY_FILE, TypeAdapter(Summary)),
    "snapshots": (SNAPSHOTS_FILE, TypeAdapter(list[Snapshot])),
    "positions": (POSITIONS_FILE, TypeAdapter(list[Position])),
    "decisions": (DECISIONS_FILE, TypeAdapter(list[Decision])),
    "theses": (THESES_FILE, TypeAdapter(list[Thesis])),
}


def is_remote(base: str) -> bool:
    """Whether the base is an http(s) URL rather than a local directory."""
    return base.startswith(("http://", "https://"))


def resource_url(base: str, name: str) -> str:
    """Join a base URL and a document name."""
    return base.rstrip("/") + "/" + name


# Failures that mean no HTTP response arrived at all
UNREACHABLE_ERRORS = (aiohttp.ClientConnectionError, asyncio.TimeoutError)


async def _fetch_remote(session: aiohttp.ClientSession, url: str) -> Optional[Any]:
    try:
        async with session.get(url) as resp:
            if not 200 <= resp.status < 300:
                logger.debug(f"{url} returned HTTP {resp.status}")
                return None
            # Static hosts often serve JSON as text/plain
            return await resp.json(content_type=None)
    except UNREACHABLE_ERRORS:
        raise
    except (aiohttp.ClientError, ValueError) as e:
        logger.debug(f"Could not fetch {url}: {e}")
        return None


async def _read_local(path: Path) -> Optional[Any]:
    try:
        text = await asyncio.to_thread(path.read_text, encoding="utf-8")
        return json.loads(text)
    except (OSError, ValueError) as e:
        logger.debug(f"Could not read {path}: {e}")
        return None


async def _fetch_payload(
    session: Optional[aiohttp.ClientSession],
    base: str,
    name: str,
) -> Optional[Any]:
    if is_remote(base):
        if session is None:
            raise ValueError("An HTTP session is required for remote data")
        return await _fetch_remote(session, resource_url(base, name))
    return await _read_local(Path(base) / name)


async def fetch_json(
    session: Optional[aiohttp.ClientSession],
    base: str,
    name: str,
) -> Optional[Any]:
    """Fetch and parse one JSON document.

    Args:
        session: HTTP session, required when ``base`` is a URL
        base: Directory path or http(s) base URL
        name: Document file name

    Returns:
        Parsed JSON, or None if the document is missing, unreachable,
        returned a non-success status, or is not valid JSON
    """
    try:
        return await _fetch_payload(session, base, name)
    except UNREACHABLE_ERRORS as e:
        logger.debug(f"Could not reach {name}: {e!r}")
        return None


def _validate(slot: str, payload: Optional[Any]) -> Optional[Any]:
    """Validate a payload into its model, or None if it does not fit."""
    if payload is None:
        return None
    name, adapter = RESOURCES[slot]
    try:
        return adapter.validate_python(payload)
    except ValidationError as e:
        logger.debug(f"Ignoring malformed {name}: {e.error_count()} validation errors")
        return None


async def _gather(session: Optional[aiohttp.ClientSession], base: str) -> DashboardData:
    slots = list(RESOURCES)
    # Every fetch settles before any outcome is inspected
    results = await asyncio.gather(
        *(_fetch_payload(session, base, RESOURCES[slot][0]) for slot in slots),
        return_exceptions=True,
    )

    unreachable = [r for r in results if isinstance(r, UNREACHABLE_ERRORS)]
    if len(unreachable) == len(results):
        raise unreachable[0]
    for result in results:
        if isinstance(result, BaseException) and not isinstance(result, UNREACHABLE_ERRORS):
            raise result

    payloads = [None if isinstance(r, BaseException) else r for r in results]
    data = DashboardData(**{
        slot: _validate(slot, payload) for slot, payload in zip(slots, payloads)
    })
    if data.missing:
        logger.debug(f"Loaded dashboard data without: {', '.join(data.missing)}")
    return data


async def fetch_all_data(
    base: str = DEFAULT_BASE,
    session: Optional[aiohttp.ClientSession] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> DashboardData:
    """Fetch all five dashboard documents in parallel.

    Args:
        base: Directory path or http(s) base URL holding the documents
        session: Existing HTTP session to reuse; one is created for remote
            bases when omitted
        timeout: Total timeout in seconds for each HTTP request

    Returns:
        DashboardData with one slot per document, ``None`` where absent

    Raises:
        aiohttp.ClientConnectionError: If every remote fetch failed before
            receiving a response
        asyncio.TimeoutError: If every remote fetch timed out
    """
    if is_remote(base) and session is None:
        client_timeout = aiohttp.ClientTimeout(total=timeout)
        async with aiohttp.ClientSession(timeout=client_timeout) as owned:
            return await _gather(owned, base)
    return await _gather(session, base)
