"""Page-load URL parameter processing.

Supported parameters:
    setting.<name>=<value>   assign a persisted setting
    name=<label>&url=<href>  load remote datasets, paired by position

`name` and `url` may be repeated (`?name=a&name=b`) or given as a bracketed
list (`?name=[a,b]`). Setting values are cast to native types
(`true`/`false`/`null`/numbers); a key with no value reads as True.
"""

import logging
import math
from typing import Any, Callable
from urllib.parse import parse_qsl

from glance_session.schemas import LoadBatch, LoadRequest
from glance_session.schemas.defaults import (
    URL_LOAD_GROUP,
    URL_NAME_PARAM,
    URL_SETTING_PREFIX,
    URL_URL_PARAM,
)

logger = logging.getLogger(__name__)

_LIST_PARAMS = (URL_NAME_PARAM, URL_URL_PARAM)


def to_native_type(text: str) -> Any:
    """Cast a raw query value the way the viewer has always read them."""
    if text == "null":
        return None
    if text == "true":
        return True
    if text == "false":
        return False
    if len(text) > 1 and text[0] == "[" and text[-1] == "]":
        return [to_native_type(part.strip()) for part in text[1:-1].split(",")]
    if text == "":
        return text
    try:
        number = float(text)
    except ValueError:
        return text
    if math.isnan(number):
        return text
    return int(number) if number.is_integer() and "." not in text else number


def _split_list(text: str) -> list[str]:
    if len(text) > 1 and text[0] == "[" and text[-1] == "]":
        return [part.strip() for part in text[1:-1].split(",")]
    return [text]


def extract_url_parameters(search: str) -> dict[str, Any]:
    """Parse a query string into {key: value}.

    `name`/`url` always come back as lists of strings. Blank entries keep
    their slot as "" so later entries still pair by position; every other
    key keeps its last value.
    """
    query = (search or "").split("#", 1)[0]
    if query.startswith("?"):
        query = query[1:]

    params: dict[str, Any] = {}
    for key, value in parse_qsl(query, keep_blank_values=True):
        if key in _LIST_PARAMS:
            params.setdefault(key, []).extend(_split_list(value))
            continue
        params[key] = to_native_type(value) if value else True
    return params


def normalize_sequence(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    """A lone string becomes a one-element list."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return [str(v) for v in value]


def pair_resources(names, urls) -> list[LoadRequest]:
    """Pair names and urls by position, truncated to the shorter sequence."""
    names = normalize_sequence(names)
    urls = normalize_sequence(urls)
    if len(names) != len(urls):
        logger.warning(
            f"URL parameters name/url differ in length ({len(names)} vs {len(urls)}); "
            f"ignoring {abs(len(names) - len(urls))} unpaired value(s)"
        )
    return [LoadRequest(name=n, url=u) for n, u in zip(names, urls)]


def process_url_args(
    read_search: Callable[[], str],
    set_setting: Callable[[str, Any], None],
    load: Callable[[LoadBatch], None],
) -> LoadBatch | None:
    """Apply the live URL's parameters.

    Reads the query string on every call (never cached). Settings are
    assigned first; then, if both `name` and `url` are present, one batch is
    handed to `load`. Loads are re-issued on every call.

    Returns:
        The dispatched LoadBatch, or None if no batch was dispatched.
    """
    params = extract_url_parameters(read_search())

    for key, value in params.items():
        if key.startswith(URL_SETTING_PREFIX):
            name = key[len(URL_SETTING_PREFIX) :]
            if name:
                set_setting(name, value)

    names = params.get(URL_NAME_PARAM, [])
    urls = params.get(URL_URL_PARAM, [])
    if not any(names) or not any(urls):
        return None

    batch = LoadBatch(group=URL_LOAD_GROUP, requests=pair_resources(names, urls))
    if not batch.requests:
        return None

    logger.info(f"Dispatching {len(batch.requests)} remote load(s) from URL")
    load(batch)
    return batch
