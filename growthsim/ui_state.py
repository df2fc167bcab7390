from __future__ import annotations

from collections.abc import Iterable, MutableMapping

PARSED_PREFIX = "_parsed_"
IMPORTED_PREFIX = "_imported_"


def upload_key(filename: str, size: int) -> str:
    """Session key marking an uploaded evidence file as already parsed."""
    return f"{PARSED_PREFIX}{filename}_{size}"


def import_key(filename: str, size: int) -> str:
    """Session key marking an uploaded profile JSON as already imported."""
    return f"{IMPORTED_PREFIX}{filename}_{size}"


def prune_upload_flags(state: MutableMapping, current: Iterable[str]) -> None:
    """Drop parsed flags for files no longer held by the uploader.

    A file taken out of the uploader and added back is parsed again.
    """
    keep = set(current)
    for key in [k for k in state.keys()
                if isinstance(k, str) and k.startswith(PARSED_PREFIX) and k not in keep]:
        del state[key]


def clear_upload_flags(state: MutableMapping) -> None:
    for key in [k for k in state.keys()
                if isinstance(k, str) and k.startswith((PARSED_PREFIX, IMPORTED_PREFIX))]:
        del state[key]
