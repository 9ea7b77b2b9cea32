from __future__ import annotations

from typing import List


def parse_sequence(text: str) -> List[int]:
    """
    Parse comma-separated integers, e.g. "3, 3, 2, 2" -> [3, 3, 2, 2].

    Whitespace around tokens is ignored and a blank string gives [].
    Any token that is not an integer (including an empty token such as
    in "1,,2") raises ValueError.
    """
    s = text.strip()
    if not s:
        return []
    out: List[int] = []
    for pos, tok in enumerate(s.split(",")):
        tok = tok.strip()
        try:
            out.append(int(tok))
        except ValueError:
            raise ValueError(
                f"token {pos + 1} of {text!r} is not an integer: {tok!r}"
            ) from None
    return out


def format_sequence(seq: List[int]) -> str:
    return ",".join(str(d) for d in seq)
