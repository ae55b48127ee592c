"""PathSegment, PathRule and RouteMatch frozen dataclasses."""

from collections.abc import Mapping
from dataclasses import dataclass

from wayfinder.targets import Target


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a rule pattern.

    Static:    ``/explore``             (is_param=False)
    Param:     ``/:username``           (is_param=True, param_name="username")
    Delimited: ``/(slug~)?:threadId``   (is_param=True, param_type="delimited", delimiter="~")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    param_type: str = "str"
    delimiter: str = ""


@dataclass(frozen=True, slots=True)
class PathRule:
    """A static routing rule. Position in its list is its priority.

    ``exact`` rules must consume the whole path; the rest match any path
    that shares their segments as a prefix.
    """

    pattern: str
    segments: tuple[PathSegment, ...]
    target: Target
    exact: bool = False
    case_sensitive: bool = False

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(s.param_name for s in self.segments if s.param_name)


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful rule match."""

    rule: PathRule
    params: Mapping[str, str]
    remainder: str = ""
