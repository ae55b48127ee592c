"""Ordered path matching.

Rules are evaluated strictly in list order and the first structural match
wins. There is no specificity ranking: a prefix rule listed early shadows
every more specific rule listed after it, so list order is part of the
routing table's contract.
"""

import re
from collections.abc import Iterable, Sequence

from wayfinder.errors import ConfigurationError
from wayfinder.routing.params import decode_param, extract_delimited_tail
from wayfinder.routing.route import PathRule, PathSegment, RouteMatch
from wayfinder.targets import Target

_PARAM_NAME = r"[A-Za-z_][A-Za-z0-9_]*"
_DELIMITED_RE = re.compile(rf"\((?P<slug>[^)]*?)(?P<delimiter>[^A-Za-z0-9)])\)\?:(?P<name>{_PARAM_NAME})")
_PARAM_RE = re.compile(rf":(?P<name>{_PARAM_NAME})")


def parse_pattern(pattern: str) -> tuple[PathSegment, ...]:
    """Parse a rule pattern into segments.

    Examples::

        "/explore"              -> (PathSegment("explore"),)
        "/users/:username"      -> (PathSegment("users"), PathSegment(":username", is_param=True, ...))
        "/:c/:ch/(slug~)?:id"   -> (..., PathSegment("(slug~)?:id", param_type="delimited", delimiter="~"))
        "/"                     -> ()

    Raises ``ConfigurationError`` for ``{param}``/``<param>`` syntax,
    malformed parameter names, repeated parameter names, or a delimited
    segment that is not the last one.
    """
    segments: list[PathSegment] = []
    for part in pattern.strip("/").split("/"):
        if not part:
            continue
        if part[0] in "{<":
            msg = (
                f"Rule pattern {pattern!r} uses {{param}} or <param> syntax. "
                "Write parameters as :param, e.g. '/users/:username'."
            )
            raise ConfigurationError(msg)

        if delimited := _DELIMITED_RE.fullmatch(part):
            segments.append(
                PathSegment(
                    value=part,
                    is_param=True,
                    param_name=delimited["name"],
                    param_type="delimited",
                    delimiter=delimited["delimiter"],
                )
            )
        elif part.startswith(":"):
            if not _PARAM_RE.fullmatch(part):
                msg = f"Rule pattern {pattern!r} has a malformed parameter {part!r}."
                raise ConfigurationError(msg)
            segments.append(PathSegment(value=part, is_param=True, param_name=part[1:]))
        else:
            segments.append(PathSegment(value=part))

    names = [s.param_name for s in segments if s.param_name]
    if len(names) != len(set(names)):
        msg = f"Rule pattern {pattern!r} repeats a parameter name."
        raise ConfigurationError(msg)
    for seg in segments[:-1]:
        if seg.param_type == "delimited":
            msg = f"Rule pattern {pattern!r}: {seg.value!r} must be the last segment."
            raise ConfigurationError(msg)
    return tuple(segments)


def rule(
    pattern: str,
    target: Target,
    *,
    exact: bool = False,
    case_sensitive: bool = False,
) -> PathRule:
    """Build a ``PathRule`` from a pattern string."""
    return PathRule(
        pattern=pattern,
        segments=parse_pattern(pattern),
        target=target,
        exact=exact,
        case_sensitive=case_sensitive,
    )


def split_path(path: str) -> list[str]:
    """Split a URL path into its non-empty segments.

    Any query string or fragment is dropped; repeated and trailing
    slashes are ignored.
    """
    path = path.split("?", 1)[0].split("#", 1)[0]
    return [p for p in path.strip("/").split("/") if p]


def _literal_matches(expected: str, actual: str, case_sensitive: bool) -> bool:
    if case_sensitive:
        return expected == actual
    return expected.casefold() == actual.casefold()


def match_rule(path_rule: PathRule, parts: Sequence[str]) -> RouteMatch | None:
    """Match a single rule against pre-split path segments."""
    segments = path_rule.segments
    if len(parts) < len(segments):
        return None

    params: dict[str, str] = {}
    consumed = len(segments)
    for index, seg in enumerate(segments):
        part = parts[index]
        if not seg.is_param:
            if not _literal_matches(seg.value, part, path_rule.case_sensitive):
                return None
        elif seg.param_type == "delimited":
            found = extract_delimited_tail(parts[index:], seg.delimiter)
            if found is None:
                return None
            identifier, used = found
            params[seg.param_name or ""] = decode_param(identifier)
            consumed = index + used
        else:
            params[seg.param_name or ""] = decode_param(part)

    if path_rule.exact and consumed != len(parts):
        return None
    rest = parts[consumed:]
    remainder = "/" + "/".join(rest) if rest else ""
    return RouteMatch(rule=path_rule, params=params, remainder=remainder)


def match(path: str, rules: Iterable[PathRule]) -> RouteMatch | None:
    """Return the first rule in *rules* matching *path*, or ``None``."""
    parts = split_path(path)
    for path_rule in rules:
        result = match_rule(path_rule, parts)
        if result is not None:
            return result
    return None
