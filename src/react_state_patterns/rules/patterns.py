"""Naming-keyword tables the rules classify identifiers with.

Every heuristic that decides intent from identifier spelling reads its words
from here, so a new keyword is a table edit and no rule logic changes.
"""

from __future__ import annotations

import re

# ── Shared name shapes ──────────────────────────────────────────────────────

BOOLEAN_PREFIXES = ("is", "has", "should", "can", "will")

# "isOpen", "has_error", "can2fa"; not "issues" or "canvas"
BOOLEAN_PREFIX_RE = re.compile(rf"^({'|'.join(BOOLEAN_PREFIXES)})(?=[A-Z0-9_])")


def boolean_prefix(name: str) -> str | None:
    m = BOOLEAN_PREFIX_RE.match(name)
    return m.group(1) if m else None


def strip_boolean_prefix(name: str) -> str:
    """isLoading -> loading, has_error -> error"""
    return BOOLEAN_PREFIX_RE.sub("", name, count=1).lower().lstrip("_")


# ── group-related-state ─────────────────────────────────────────────────────

BASE_SUFFIX_RE = re.compile(
    r"^(.+)(Id|Name|Email|Phone|Address|Date|Time|Count|Total|Size|Price|"
    r"Quantity|Status|Type|Description)$",
    re.IGNORECASE,
)

FORM_FIELD_SUFFIXES = (
    "name", "email", "password", "phone", "address", "city", "state", "zip", "country",
)

STATUS_WORDS = ("loading", "error", "success", "fetching", "pending")


# ── avoid-state-contradictions ──────────────────────────────────────────────

STATUS_FAMILIES: tuple[tuple[str, ...], ...] = (
    ("loading", "error", "success", "idle"),
    ("fetching", "error", "success"),
    ("pending", "resolved", "rejected"),
    ("open", "closed", "closing", "opening"),
    ("visible", "hidden", "hiding", "showing"),
    ("expanded", "collapsed", "expanding", "collapsing"),
    ("pristine", "dirty", "submitting", "submitted"),
    ("valid", "invalid", "validating"),
    ("connected", "disconnected", "connecting"),
    ("online", "offline", "reconnecting"),
)

CONTRADICTION_STATE_WORDS = ("loading", "error", "success", "pending", "complete")

LOADING_LIKE_VALUES = ("loading", "fetching", "pending")

DEFAULT_STATUS_VALUES = ("idle", "loading", "success", "error")


# ── avoid-redundant-state ───────────────────────────────────────────────────

COMPUTED_NAME_WORDS = (
    "total", "sum", "count", "length", "size",
    "full", "empty", "valid", "invalid",
    "enabled", "disabled", "visible", "hidden",
    "selected", "checked", "active",
    "formatted", "display", "label",
    "percent", "progress", "ratio",
    "min", "max", "average", "mean",
)

# Computable from a list held in a sibling state.
COUNT_LIKE_WORDS = ("count", "length", "size", "total")
COLLECTION_NAME_WORDS = ("items", "list")

# Computable from a boolean held in a sibling state.
TOGGLE_LIKE_WORDS = ("enabled", "disabled", "visible", "hidden")


# ── avoid-deeply-nested-state ───────────────────────────────────────────────

MAX_STATE_DEPTH = 2
MAX_NORMALIZED_DEPTH = 3
ENTITY_KEY_RE = re.compile(r"^\d+$|^[a-zA-Z0-9]{1,10}$")


# ── detect-state-in-useeffect ───────────────────────────────────────────────

DERIVED_NAME_WORDS = (
    "filtered", "sorted", "formatted",
    "total", "sum", "count", "percentage", "percent", "ratio", "average", "mean",
    "display", "label", "text",
    "visible", "hidden", "enabled", "disabled", "valid", "invalid",
    "all", "none", "some", "every",
    "has", "is",
)

ARRAY_TRANSFORM_METHODS = frozenset({
    "filter", "map", "reduce", "sort", "find", "findIndex",
    "some", "every", "includes", "slice", "concat",
})

STRING_FORMAT_METHODS = frozenset({
    "toLocaleDateString", "toLocaleString", "toFixed",
    "toLowerCase", "toUpperCase", "trim", "split", "join",
})

ARITHMETIC_OPERATORS = frozenset({"+", "-", "*", "/", "%", "**"})


# ── state-vs-refs ───────────────────────────────────────────────────────────

NON_RENDER_NAME_WORDS = (
    # timers
    "timerid", "timer", "intervalid", "interval", "timeout", "timeoutid",
    # element handles
    "ref", "element", "node", "dom",
    # previous values
    "prev", "previous", "last", "old",
    # tracking counters
    "count", "counter", "clicks", "index", "position",
    # lifecycle flags
    "mounted", "initialized", "setup", "ready",
    # timestamps
    "time", "mounttime", "rendercount",
)

HANDLER_PREFIXES = ("handle", "on")


# ── server-vs-client-state ──────────────────────────────────────────────────

HTTP_CLIENT_OBJECTS = frozenset({"axios", "http", "api", "client", "$http"})
HTTP_CLIENT_METHODS = frozenset({"get", "post", "put", "delete", "patch", "request", "query"})

GRAPHQL_CLIENT_OBJECTS = frozenset({"client", "apollo", "graphql"})   # compared lowercase
GRAPHQL_METHODS = frozenset({"query", "mutate", "subscribe"})

LOADING_STATE_WORDS = ("loading", "fetching", "pending")
ERROR_STATE_WORDS = ("error",)
DATA_STATE_WORDS = (
    "data", "result", "response", "items", "users", "posts", "products", "orders",
)

CLIENT_STATE_WORDS = (
    "formdata", "form", "input", "selected", "isopen", "isclosed", "isvisible",
    "ishidden", "theme", "modal", "dropdown", "tab", "active",
)

SERVER_DATA_WORDS = (
    "users", "posts", "products", "items", "apidata", "results", "response",
    "orders", "customers", "articles", "comments", "profile", "settings",
    "config", "apiresponse",
)


# ── form-state-patterns ─────────────────────────────────────────────────────

FORM_FIELD_PATTERNS = tuple(re.compile(p) for p in (
    r"^(first|last|middle)?name$",
    r"^email$",
    r"^password$",
    r"^confirm(password|email)$",
    r"^phone(number)?$",
    r"^address$",
    r"^(street|city|state|zip|postal|country)$",
    r"^(birth|start|end)date$",
    r"^age$",
    r"^gender$",
    r"^title$",
    r"^description$",
    r"^message$",
    r"^comment$",
    r"^notes?$",
    r"^company$",
    r"^position$",
    r"^website$",
    r"^url$",
    r"^.*(name|email|phone|address|date|time|value)$",
    r"^(selected|current|chosen).+$",
    r"^(billing|shipping|contact|personal|work).+$",
))

VALIDATION_STATE_PATTERNS = tuple(re.compile(p) for p in (
    r"error$",
    r"errors$",
    r"valid$",
    r"invalid$",
    r"touched$",
    r"dirty$",
    r"pristine$",
    r"^is.*valid$",
    r"^is.*invalid$",
    r"^is.*touched$",
    r"^is.*dirty$",
    r"^has.*error$",
    r"^show.*error$",
    r"validating$",
    r"^is.*validating$",
))

FORM_WARNING_THRESHOLD = 7
FORM_ERROR_THRESHOLD = 12
FORM_DEFAULTS_THRESHOLD = 10
MANUAL_RESET_MIN_SETTERS = 3


def contains_any(name: str, words) -> bool:
    return any(w in name for w in words)
