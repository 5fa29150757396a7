"""JSON describer - classify, describe and diff JSON documents in plain English."""

from __future__ import annotations

import logging

from json_describer.api import (
    classify,
    describe,
    describe_friendly,
    diff_counts,
    diff_keys,
    friendly,
    inventory,
    parse_as_array,
    parse_as_object,
    summarize_diff,
)
from json_describer.config import DescriberConfig, MemberErrorPolicy, TallyOrder
from json_describer.description import DocumentDescription
from json_describer.differ import DiffCounts, DiffResult
from json_describer.errors import (
    InventoryError,
    JsonDescriberError,
    MemberClassificationError,
    NestingTooDeepError,
    NotAnArrayError,
    NotAnObjectError,
    NotValidJSONError,
    WrongKindError,
)
from json_describer.kinds import ElementKind
from json_describer.raw import RawArray, RawObject

# Library logging: silent unless the application configures a handler
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "DescriberConfig",
    "DiffCounts",
    "DiffResult",
    "DocumentDescription",
    "ElementKind",
    "InventoryError",
    "JsonDescriberError",
    "MemberClassificationError",
    "MemberErrorPolicy",
    "NestingTooDeepError",
    "NotAnArrayError",
    "NotAnObjectError",
    "NotValidJSONError",
    "RawArray",
    "RawObject",
    "TallyOrder",
    "WrongKindError",
    "classify",
    "describe",
    "describe_friendly",
    "diff_counts",
    "diff_keys",
    "friendly",
    "inventory",
    "parse_as_array",
    "parse_as_object",
    "summarize_diff",
]
