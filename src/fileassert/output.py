"""Key/value formatting and decoration for failure diagnostics.

The layouts follow the bats-support conventions so diagnostics read the same
as those of shell-based test suites::

    -- file does not exist --
    path : /tmp/out/hello.txt
    --
"""

from __future__ import annotations


def count_lines(text: str) -> int:
    """Number of lines in *text*, counting a final unterminated line."""
    if not text:
        return 0
    return text.count("\n") + (0 if text.endswith("\n") else 1)


def is_single_line(*values: str) -> bool:
    return not any("\n" in value for value in values)


def prefix(text: str, prefix_str: str = "  ") -> str:
    """Prefix every line of *text*."""
    return "\n".join(prefix_str + line for line in text.split("\n"))


def _pairs(pairs: tuple[str, ...]) -> list[tuple[str, str]]:
    if len(pairs) % 2:
        raise ValueError("key/value arguments must come in pairs")
    return list(zip(pairs[::2], pairs[1::2]))


def print_kv_single(width: int, *pairs: str) -> str:
    """Render pairs as ``key : value`` lines with a fixed key column width."""
    return "".join(f"{key:<{width}} : {value}\n" for key, value in _pairs(pairs))


def print_kv_multi(*pairs: str) -> str:
    """Render pairs as a ``key (N lines):`` header followed by the value."""
    return "".join(
        f"{key} ({count_lines(value)} lines):\n{value}\n" for key, value in _pairs(pairs)
    )


def print_kv_single_or_multi(width: int, *pairs: str) -> str:
    """Pick the single-line layout if every value fits on one line.

    Otherwise every value is indented and the multi-line layout is used for
    all pairs, so the block stays uniform.
    """
    kv = _pairs(pairs)
    if is_single_line(*(value for _, value in kv)):
        return print_kv_single(width, *pairs)
    flat: list[str] = []
    for key, value in kv:
        flat.extend([key, prefix(value)])
    return print_kv_multi(*flat)


def decorate(title: str, body: str) -> str:
    """Wrap *body* between a ``-- title --`` header and a ``--`` footer."""
    if body and not body.endswith("\n"):
        body += "\n"
    return f"-- {title} --\n{body}--\n"
