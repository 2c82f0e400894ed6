"""Process-wide namespace -> prefix registry sourced from Linked Open Vocabularies."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

import requests

from rdflabel.config import CONFIG
from rdflabel.models import VocabularyEntry
from rdflabel.utils import profile_time


class VocabularyRegistry(Mapping):
    """Read-only mapping of namespace URI to canonical vocabulary prefix.

    Built once, before any label is requested, and shared by every caller.
    """

    def __init__(self, prefixes: Optional[Mapping] = None) -> None:
        self._prefixes = MappingProxyType(dict(prefixes or {}))

    def __getitem__(self, namespace: str) -> str:
        return self._prefixes[namespace]

    def __iter__(self) -> Iterator[str]:
        return iter(self._prefixes)

    def __len__(self) -> int:
        return len(self._prefixes)

    def __repr__(self) -> str:
        return f"VocabularyRegistry({len(self)} namespaces)"


EMPTY_REGISTRY = VocabularyRegistry()


def build_vocabulary_registry(entries: Iterable[VocabularyEntry]) -> VocabularyRegistry:
    """Collect ``entries`` into a registry; the first prefix seen for a namespace wins."""
    prefixes: Dict[str, str] = {}
    duplicates = 0
    for entry in entries:
        if not entry.namespace or not entry.prefix:
            continue
        if entry.namespace in prefixes:
            duplicates += 1
            continue
        prefixes[entry.namespace] = entry.prefix
    if duplicates:
        logging.debug("Skipped %s duplicate vocabulary namespace(s).", duplicates)
    return VocabularyRegistry(prefixes)


def _entry_from_payload(item: Any) -> Optional[VocabularyEntry]:
    if not isinstance(item, dict):
        return None
    namespace = item.get("nsp") or item.get("namespace") or item.get("vocabularyNamespace")
    prefix = item.get("prefix")
    if not isinstance(namespace, str) or not isinstance(prefix, str):
        return None
    namespace = namespace.strip()
    prefix = prefix.strip()
    if not namespace or not prefix:
        return None
    return VocabularyEntry(namespace=namespace, prefix=prefix)


def _entries_from_payload(payload: Any) -> List[VocabularyEntry]:
    if isinstance(payload, dict):
        payload = payload.get("results") or payload.get("vocabularies") or []
    if not isinstance(payload, list):
        raise ValueError("Vocabulary payload is not a list.")
    entries = []
    for item in payload:
        entry = _entry_from_payload(item)
        if entry is not None:
            entries.append(entry)
    return entries


@profile_time
def fetch_lov_entries(url: Optional[str] = None, timeout: Optional[float] = None) -> List[VocabularyEntry]:
    """
    Download the vocabulary list from the LOV catalogue.
    Raises RuntimeError when the endpoint cannot be reached or returns garbage.
    """
    url = url or CONFIG["LOV_API_URL"]
    timeout = timeout if timeout is not None else CONFIG["LOV_TIMEOUT"]
    try:
        resp = requests.get(url, headers={"Accept": "application/json"}, timeout=timeout)
    except requests.RequestException as exc:
        raise RuntimeError(f"LOV request failed: {exc}") from exc
    try:
        resp.raise_for_status()
    except requests.HTTPError as exc:
        raise RuntimeError(f"LOV request failed: {exc}\nBody: {resp.text[:500]}") from exc
    try:
        entries = _entries_from_payload(resp.json())
    except ValueError as exc:
        raise RuntimeError(f"LOV response could not be decoded: {exc}\nBody: {resp.text[:500]}") from exc
    logging.info("Fetched %s vocabulary prefix(es) from %s.", len(entries), url)
    return entries


def load_cached_entries(path: Path) -> List[VocabularyEntry]:
    with open(path, "r", encoding="utf-8") as f:
        payload = json.load(f)
    return _entries_from_payload(payload)


def save_cached_entries(entries: Iterable[VocabularyEntry], path: Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = [{"prefix": e.prefix, "namespace": e.namespace} for e in entries]
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")


def _resolve_source(
    cache_path: Optional[str],
    fetch: bool,
    url: Optional[str],
) -> Tuple[List[VocabularyEntry], str]:
    if cache_path:
        path = Path(cache_path)
        if path.exists():
            return load_cached_entries(path), str(path)
    if not fetch:
        return [], "disabled"
    entries = fetch_lov_entries(url)
    if cache_path:
        try:
            save_cached_entries(entries, Path(cache_path))
        except OSError as exc:
            logging.warning("Could not write vocabulary cache %s: %s", cache_path, exc)
    return entries, url or CONFIG["LOV_API_URL"]


def load_vocabulary_registry(
    cache_path: Optional[str] = None,
    fetch: Optional[bool] = None,
    url: Optional[str] = None,
) -> VocabularyRegistry:
    """
    One-time startup step that builds the shared registry.
    Reads the local cache when present, otherwise queries LOV and refreshes the cache.
    Any failure degrades to an empty registry so labelling keeps working.
    """
    if cache_path is None:
        cache_path = CONFIG["LOV_CACHE_PATH"]
    if fetch is None:
        fetch = CONFIG["LOV_ENABLED"]
    try:
        entries, source = _resolve_source(cache_path, fetch, url)
    except (RuntimeError, OSError, ValueError) as exc:
        logging.error("Error loading vocabulary prefixes: %s", exc)
        return EMPTY_REGISTRY
    registry = build_vocabulary_registry(entries)
    logging.info("Vocabulary registry ready with %s namespace(s) (source: %s).", len(registry), source)
    return registry
