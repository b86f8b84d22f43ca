"""Force ``!important`` onto CSS declarations.

Embedded fragments end up inside host pages (blog themes, page builders) whose
own rules would otherwise win. This is a textual pass over ``{ ... }``
declaration blocks, not a CSS parser.
"""

from __future__ import annotations

import re

# Quoted strings and comments are swapped for numbered placeholders before
# blocks are split, so braces and semicolons inside them are never structure.
_OPAQUE_RE = re.compile(
    r"""/\*.*?\*/|"(?:\\.|[^"\\\n])*"|'(?:\\.|[^'\\\n])*'""",
    re.DOTALL,
)
_STRING_MARK = "\x00"
_COMMENT_MARK = "\x01"
_PLACEHOLDER_RE = re.compile(r"[\x00\x01](\d+)[\x00\x01]")
_COMMENT_PLACEHOLDER_RE = re.compile(r"\x01\d+\x01")

# Innermost blocks only, so @media/@supports wrappers are left alone and the
# rules nested inside them are still reached.
_BLOCK_RE = re.compile(r"\{([^{}]*)\}")
# Semicolons inside url(...) / data URIs are not declaration separators.
_SPLIT_RE = re.compile(r";(?![^(]*\))")
_IMPORTANT_RE = re.compile(r"!\s*important\s*$", re.IGNORECASE)

IMPORTANT = "!important"


def _mask(css: str) -> tuple[str, list[str]]:
    saved: list[str] = []

    def keep(match: re.Match[str]) -> str:
        token = match.group(0)
        saved.append(token)
        mark = _COMMENT_MARK if token.startswith("/*") else _STRING_MARK
        return f"{mark}{len(saved) - 1}{mark}"

    return _OPAQUE_RE.sub(keep, css), saved


def _unmask(css: str, saved: list[str]) -> str:
    return _PLACEHOLDER_RE.sub(lambda m: saved[int(m.group(1))], css)


def _force_declaration(declaration: str) -> str:
    code = _COMMENT_PLACEHOLDER_RE.sub("", declaration).strip()
    if not code or ":" not in code:
        return declaration
    if _IMPORTANT_RE.search(code):
        return declaration

    stripped = declaration.rstrip()
    trailing = declaration[len(stripped) :]
    return f"{stripped} {IMPORTANT}{trailing}"


def _force_block(match: re.Match[str]) -> str:
    declarations = _SPLIT_RE.split(match.group(1))
    return "{" + ";".join(_force_declaration(d) for d in declarations) + "}"


def force_important(css: str) -> str:
    """Append ``!important`` to every declaration that does not already carry it.

    Text inside quoted strings and comments is never modified. Idempotent:
    running it on its own output changes nothing.
    """

    masked, saved = _mask(css)
    return _unmask(_BLOCK_RE.sub(_force_block, masked), saved)
