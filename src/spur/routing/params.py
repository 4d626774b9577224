"""Path parameter regex shortcuts.

A placeholder may name a shortcut instead of spelling out a regex:
``{id:i}`` is the same as ``{id:[0-9]+}``.
"""

# shortcut letter -> regex it expands to
SHORTCUTS: dict[str, str] = {
    "i": r"[0-9]+",  # integer
    "a": r"[a-zA-Z0-9]+",  # alphanumeric
    "s": r"[a-zA-Z0-9_\-.]+",  # slug: alphanumeric, "_", "-" and "."
}

# Used when a placeholder has no regex: anything up to the next "/"
DEFAULT_PARAM_REGEX = r"[^/]+"


def expand_shortcuts(path: str) -> str:
    """Replace every ``:<shortcut>}`` in *path* with its regex form.

    Only a shortcut that fills the whole regex slot is expanded, so
    ``{name:a}`` expands but ``{name:ab}`` is left alone.
    """
    for shortcut, regex in SHORTCUTS.items():
        path = path.replace(f":{shortcut}}}", f":{regex}}}")
    return path
