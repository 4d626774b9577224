"""Dynamic route pattern compiler.

Turns a path such as ``users/{id:i}/posts/{slug}?`` into a ``RoutePattern``:
one regex for matching requests and a segment list for building paths back
from arguments.

Placeholder syntax::

    {name}            anything up to the next "/"
    {name:regex}      custom regex (no capturing groups, no braces)
    {name:i}          shortcut, see ``spur.routing.params.SHORTCUTS``
    {name}?           optional parameter

An optional parameter swallows one neighbouring ``/`` in the match regex,
so ``comments/{filter}?`` matches both ``comments`` and
``comments/deleted``. The segment list keeps that ``/`` as its own piece so
the reverse router can drop it when the value is omitted.
"""

import re

from spur.errors import InvalidPatternError
from spur.routing.params import DEFAULT_PARAM_REGEX, expand_shortcuts
from spur.routing.route import ParamSegment, RoutePattern, Segment
from spur.routing.validation import validate_static_path

# No nested and no unmatched braces: /this/{will/not/{work}
BALANCED_BRACES_RE = re.compile(r"[^{}]*(?:\{[^{}]*\}[^{}]*)*")

# Any brace pair, whatever is inside it
LOOSE_PARAM_RE = re.compile(r"\{[^{}]*\}")

# A well-formed placeholder: name, optional regex, optional "?" suffix
PARAM_RE = re.compile(r"\{([a-zA-Z0-9_]+)(?::([^{}]+))?\}(\?)?")


def is_static_path(path: str) -> bool:
    return "{" not in path and "}" not in path


def _validate_braces(path: str) -> None:
    if not BALANCED_BRACES_RE.fullmatch(path):
        msg = f"Mismatching curly braces in '{path}' route."
        raise InvalidPatternError(msg)


def _validate_static_parts(path: str) -> None:
    # comments/{id}/popular -> comments/param/popular
    validate_static_path(LOOSE_PARAM_RE.sub("param", path.replace("}?", "}")))


def _validate_params_count(path: str, found: int) -> None:
    invalid = len(LOOSE_PARAM_RE.findall(path)) - found
    if invalid:
        noun = "parameter" if invalid == 1 else "parameters"
        msg = f"{invalid} invalid {noun} found in '{path}' route."
        raise InvalidPatternError(msg)


def _validate_unique_names(path: str, names: list[str]) -> None:
    seen: set[str] = set()
    for name in names:
        if name in seen:
            msg = f"Parameter '{name}' found more than once in '{path}' route."
            raise InvalidPatternError(msg)
        seen.add(name)


def _param_group(name: str, regex: str, path: str) -> str:
    group = f"({regex})"
    try:
        compiled = re.compile(group)
    except re.error as exc:
        msg = f"'{regex}' is not a valid regex for parameter '{name}' in '{path}' route."
        raise InvalidPatternError(msg) from exc
    if compiled.groups != 1:
        msg = (
            f"The regex for parameter '{name}' in '{path}' route contains a "
            "capturing group. Use (?:...) instead."
        )
        raise InvalidPatternError(msg)
    return group


class _Assembler:
    """Builds the regex fragments and the segment list side by side.

    The two lists are not index-aligned: an optional parameter merges a
    ``/`` into its own regex fragment but leaves it in the segments.
    """

    __slots__ = ("fragments", "path", "segments", "_skip_slash")

    def __init__(self, path: str) -> None:
        self.path = path
        self.fragments: list[str] = []
        self.segments: list[Segment] = []
        self._skip_slash = False

    def add_static(self, text: str) -> None:
        for piece in re.split(r"(/)", text):
            if not piece:
                continue
            self.segments.append(piece)
            if self._skip_slash and piece == "/":
                # already part of the previous optional parameter's group
                self._skip_slash = False
                continue
            self._skip_slash = False
            self.fragments.append(re.escape(piece))

    def add_param(self, name: str, regex: str, optional: bool, next_char: str) -> None:
        group = _param_group(name, regex, self.path)
        self.segments.append(ParamSegment(name, f"^{group}$", optional))
        if optional:
            if self.fragments and self.fragments[-1] == "/":
                self.fragments.pop()
                group = f"(?:/{group})"
            elif next_char == "/":
                group = f"(?:{group}/)"
                self._skip_slash = True
            group += "?"
        self.fragments.append(group)

    def build(self, path: str, names: list[str]) -> RoutePattern:
        return RoutePattern(
            path=path,
            regex="".join(self.fragments),
            segments=tuple(self.segments),
            param_names=tuple(names),
        )


def compile_pattern(path: str, *, prefix: str = "") -> RoutePattern:
    """Compile a dynamic route path.

    *path* is the route path with surrounding slashes already trimmed.
    *prefix* is trusted literal text (the router namespace) placed in
    front of the path; it is not validated here.

    Raises ``InvalidPatternError`` if the path is malformed.
    """
    path = expand_shortcuts(path)

    _validate_braces(path)
    _validate_static_parts(path)

    placeholders = list(PARAM_RE.finditer(path))
    _validate_params_count(path, len(placeholders))

    names = [m.group(1) for m in placeholders]
    _validate_unique_names(path, names)

    assembler = _Assembler(path)
    if prefix:
        assembler.add_static(f"{prefix}/")

    prev_end = 0
    for m in placeholders:
        name, regex, optional = m.group(1), m.group(2), m.group(3) is not None
        assembler.add_static(path[prev_end : m.start()])
        assembler.add_param(
            name,
            regex or DEFAULT_PARAM_REGEX,
            optional,
            path[m.end() : m.end() + 1],
        )
        prev_end = m.end()
    assembler.add_static(path[prev_end:])

    full_path = f"{prefix}/{path}" if prefix else path
    return assembler.build(full_path, names)
