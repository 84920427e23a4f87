"""Reversible URL patterns.

A ``UrlPattern`` is a restricted regular expression designed for URL
paths. It matches a whole path, returns its groups in order, and can
rebuild a path from a list of arguments.

The differences from a plain ``re.Pattern``:

* Everything outside a group is a literal. Regex metacharacters outside
  groups are escaped automatically.
* A match must span the entire string. Anchors are added for you.
* Top-level groups must be separated by at least one literal character,
  so ``(.*)(.*)`` is rejected as ambiguous.
* ``#`` matches both ``#`` and ``/``. It may appear once, outside groups.

Since ``#`` matches either separator, it marks the boundary between the
"static" part of an app URL and the part that changes without reloading
the page. Hosts with push-state history get plain paths, other hosts get
fragments, and both resolve to the same route::

    pattern = UrlPattern(r"/app#profile/(\\d+)")
    pattern.matches("/app/profile/1234")               # True
    pattern.matches("/app#profile/1234")               # True
    pattern.reverse([1234], use_fragment=True)         # "/app#profile/1234"
    pattern.reverse([1234], use_fragment=False)        # "/app/profile/1234"
"""

import re
from collections.abc import Iterable
from enum import Enum, auto

from wren.errors import ArgumentCountError, MalformedPatternError, NoMatchError


class _Token(Enum):
    """Non-literal pieces of a reverse template."""

    GROUP = auto()
    FRAGMENT = auto()


type _Template = tuple[str | _Token, ...]


class UrlPattern:
    """A compiled, reversible URL pattern.

    Immutable. Two patterns are equal when their raw strings are equal.
    """

    __slots__ = (
        "_base_regex",
        "_group_indices",
        "_pattern",
        "_regex",
        "_template",
    )

    def __init__(self, pattern: str) -> None:
        self._pattern = pattern
        (
            self._regex,
            self._base_regex,
            self._group_indices,
            self._template,
        ) = _compile(pattern)

    @property
    def pattern(self) -> str:
        """The raw pattern string."""
        return self._pattern

    @property
    def regex(self) -> re.Pattern[str]:
        """The anchored matcher."""
        return self._regex

    @property
    def base_regex(self) -> re.Pattern[str] | None:
        """Anchored matcher for the portion before ``#``, if any."""
        return self._base_regex

    @property
    def has_fragment(self) -> bool:
        return self._base_regex is not None

    @property
    def capture_count(self) -> int:
        """Number of top-level capture groups."""
        return len(self._group_indices)

    def matches(self, path: str) -> bool:
        """Return True if this pattern matches the whole of *path*."""
        return self._regex.match(path) is not None

    def matches_non_fragment(self, path: str) -> bool:
        """Match *path* against the part of the pattern before ``#``.

        Useful on a server that serves a single page app: clients without
        push-state support never send the fragment, so only the path part
        reaches the server. Equivalent to ``matches()`` when the pattern
        has no ``#``.
        """
        if self._base_regex is None:
            return self.matches(path)
        return self._base_regex.match(path) is not None

    def parse(self, path: str) -> list[str]:
        """Return the top-level groups of *path*, in declaration order.

        Raises ``NoMatchError`` if the pattern does not match *path*.
        """
        match = self._regex.match(path)
        if match is None:
            raise NoMatchError(self._pattern, path)
        return [match.group(index) for index in self._group_indices]

    def reverse(self, args: Iterable[object], *, use_fragment: bool = False) -> str:
        """Build a path by substituting *args* for the top-level groups.

        The ``#`` marker is written as ``#`` when *use_fragment* is true
        and as ``/`` otherwise. Extra arguments are ignored.

        Raises ``ArgumentCountError`` if there are fewer arguments than
        groups.
        """
        values = list(args)
        if len(values) < self.capture_count:
            msg = (
                f"Pattern {self._pattern!r} has {self.capture_count} groups "
                f"but {len(values)} arguments were given"
            )
            raise ArgumentCountError(msg)

        remaining = iter(values)
        parts: list[str] = []
        for token in self._template:
            if token is _Token.GROUP:
                parts.append(str(next(remaining)))
            elif token is _Token.FRAGMENT:
                parts.append("#" if use_fragment else "/")
            else:
                parts.append(token)
        return "".join(parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UrlPattern):
            return NotImplemented
        return self._pattern == other._pattern

    def __hash__(self) -> int:
        return hash(self._pattern)

    def __str__(self) -> str:
        return self._pattern

    def __repr__(self) -> str:
        return f"UrlPattern({self._pattern!r})"


def compile_pattern(pattern: str) -> UrlPattern:
    """Compile *pattern*, raising ``MalformedPatternError`` if it is invalid."""
    return UrlPattern(pattern)


def _compile(
    pattern: str,
) -> tuple[re.Pattern[str], re.Pattern[str] | None, tuple[int, ...], _Template]:
    """Scan *pattern* once and build its matchers and reverse template.

    Returns ``(regex, base_regex, group_indices, template)`` where
    *group_indices* are the ``re`` group numbers of the top-level groups.
    """
    parts: list[str] = ["^"]
    template: list[str | _Token] = []
    literal: list[str] = []
    base: str | None = None
    group_indices: list[int] = []
    group_count = 0

    depth = 0
    escaped = False
    last_group_end = -2
    class_start = -1  # index of the '[' opening a character class inside a group

    def flush_literal() -> None:
        if literal:
            template.append("".join(literal))
            literal.clear()

    for i, c in enumerate(pattern):
        if depth == 0:
            # Outside groups everything is a literal.
            if c == "\\" and not escaped:
                escaped = True
                continue
            if escaped:
                parts.append(re.escape(c))
                literal.append(c)
                escaped = False
            elif c == "(":
                if last_group_end == i - 1:
                    raise MalformedPatternError(
                        pattern, f"ambiguous adjacent top-level groups at index {i}"
                    )
                if pattern.startswith("?", i + 1):
                    raise MalformedPatternError(
                        pattern, f"top-level group at index {i} must be a plain capture group"
                    )
                group_count += 1
                group_indices.append(group_count)
                flush_literal()
                template.append(_Token.GROUP)
                parts.append("(")
                depth = 1
            elif c == ")":
                raise MalformedPatternError(pattern, f"unmatched ')' at index {i}")
            elif c == "#":
                if base is not None:
                    raise MalformedPatternError(pattern, "multiple '#' characters")
                base = "".join(parts)
                flush_literal()
                template.append(_Token.FRAGMENT)
                parts.append("[/#]")
            else:
                parts.append(re.escape(c))
                literal.append(c)
            continue

        # Inside a group the body is copied verbatim; track depth only.
        if c == "#":
            raise MalformedPatternError(pattern, f"'#' inside a group at index {i}")
        parts.append(c)
        if escaped:
            escaped = False
        elif c == "\\":
            escaped = True
        elif class_start >= 0:
            leading = i == class_start + 1 or (
                i == class_start + 2 and pattern[class_start + 1] == "^"
            )
            if c == "]" and not leading:
                class_start = -1
        elif c == "[":
            class_start = i
        elif c == "(":
            depth += 1
            # (?:...), look-arounds and the like do not capture; (?P<name>...) does.
            if not pattern.startswith("?", i + 1) or pattern.startswith("?P<", i + 1):
                group_count += 1
        elif c == ")":
            depth -= 1
            if depth == 0:
                last_group_end = i

    if depth > 0:
        raise MalformedPatternError(pattern, "unclosed group")
    if escaped:
        raise MalformedPatternError(pattern, "trailing backslash")
    flush_literal()

    parts.append(r"\Z")
    try:
        regex = re.compile("".join(parts))
        base_regex = re.compile(base + r"\Z") if base is not None else None
    except re.error as exc:
        raise MalformedPatternError(pattern, str(exc)) from exc
    if regex.groups != group_count:
        raise MalformedPatternError(pattern, "unsupported group syntax")

    return regex, base_regex, tuple(group_indices), tuple(template)
