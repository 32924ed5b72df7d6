from __future__ import annotations

import re
from dataclasses import dataclass

# class="..." / class='...' / className="..." / className='...'
# className={`...`} / className={"..."} / className={'...'}
CLASS_ATTR_RE = re.compile(
    r"class(?:Name)?\s*=\s*(?:"
    r"\"([^\"]+)\"|"
    r"'([^']+)'|"
    r"\{\s*`([^`]+)`\s*\}|"
    r"\{\s*\"([^\"]+)\"\s*\}|"
    r"\{\s*'([^']+)'\s*\}"
    r")"
)


@dataclass(frozen=True, slots=True)
class ClassToken:
    class_name: str
    line: int  # 1-based
    column: int  # 1-based


def extract_class_names(text: str) -> list[ClassToken]:
    """
    Find every class token inside `class=` / `className=` attributes.

    Matching is done on raw text, not on a parsed document: malformed attribute
    syntax simply produces no tokens. Tokens are returned in source order.
    """

    tokens: list[ClassToken] = []
    for match in CLASS_ATTR_RE.finditer(text):
        group_index, raw = _attribute_value(match)
        if raw is None:
            continue

        value_start = match.start(group_index)
        cursor = 0
        for class_name in raw.split():
            # Advance monotonically so repeated names get their own offsets.
            idx = raw.find(class_name, cursor)
            if idx < 0:  # pragma: no cover
                idx = cursor
            cursor = idx + len(class_name)
            line, column = line_col_at_offset(text, value_start + idx)
            tokens.append(ClassToken(class_name=class_name, line=line, column=column))

    return tokens


def line_col_at_offset(text: str, offset: int) -> tuple[int, int]:
    line = text.count("\n", 0, offset) + 1
    last_newline = text.rfind("\n", 0, offset)
    column = offset + 1 if last_newline == -1 else offset - last_newline
    return line, column


def _attribute_value(match: re.Match[str]) -> tuple[int, str | None]:
    for index, value in enumerate(match.groups(), start=1):
        if value is not None:
            return index, value
    return 0, None
