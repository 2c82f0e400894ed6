"""Data models for labels and vocabulary entries."""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class VocabularyEntry:
    namespace: str
    prefix: str


@dataclass
class LabeledNode:
    id: str
    label: str
    uri: str
    types: List[str] = field(default_factory=list)
    properties: Dict[str, str] = field(default_factory=dict)


@dataclass
class LabeledEdge:
    source: str
    target: str
    label: str
    uri: str
