"""Invariant checks over a token sequence."""

from __future__ import annotations

from collections.abc import Sequence

from crafty_novels.errors import TokenSequenceError
from crafty_novels.syntax.minecraft import StyleKind
from crafty_novels.syntax.tokens import Frontmatter, StyleEnd, StyleStart, Token


def validate_tokens(tokens: Sequence[Token], *, strict_nesting: bool = True) -> None:
    """Raise TokenSequenceError if `tokens` breaks a token model invariant.

    Checks that frontmatter is first and unique, that every style is opened
    before it is closed and closed before the end, and (with
    ``strict_nesting``) that styles close in LIFO order.
    """
    open_kinds: list[StyleKind] = []

    for index, token in enumerate(tokens):
        if isinstance(token, Frontmatter) and index != 0:
            raise TokenSequenceError("frontmatter must be the first token", index)

        if isinstance(token, StyleStart):
            open_kinds.append(token.kind)
        elif isinstance(token, StyleEnd):
            if token.kind not in open_kinds:
                raise TokenSequenceError(f"{token.describe()} closes a style that is not open", index)
            if strict_nesting and open_kinds[-1] != token.kind:
                raise TokenSequenceError(
                    f"{token.describe()} closes out of order (innermost open is {open_kinds[-1]!r})",
                    index,
                )
            # remove the innermost matching open
            for pos in range(len(open_kinds) - 1, -1, -1):
                if open_kinds[pos] == token.kind:
                    del open_kinds[pos]
                    break

    if open_kinds:
        raise TokenSequenceError(f"unclosed styles at end of sequence: {open_kinds!r}")
