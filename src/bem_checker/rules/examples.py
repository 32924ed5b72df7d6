from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RuleExample:
    language: str
    bad: str
    good: str | None = None
    notes: str | None = None


EXAMPLES: dict[str, RuleExample] = {
    "R4_NO_ELEMENT_NESTING": RuleExample(
        language="html",
        bad='<span class="card__body__title"></span>\n',
        good='<span class="card__body-title"></span>\n',
        notes="Only the first `__` introduces an element; later segments are joined with `-`.",
    ),
    "R1_CHECK_BLOCK": RuleExample(
        language="html",
        bad='<div class="ProfileCard"></div>\n',
        good='<div class="profile-card"></div>\n',
    ),
    "R2_CHECK_ELEMENT": RuleExample(
        language="html",
        bad='<h2 class="profile-card-title"></h2>\n<h2 class="profile_title"></h2>\n',
        good='<h2 class="profile-card__title"></h2>\n<h2 class="profile__title"></h2>\n',
        notes="A single `_` and three or more hyphen-joined parts both suggest a mis-delimited element.",
    ),
    "R3_CHECK_MODIFIER": RuleExample(
        language="jsx",
        bad='<button className="button__icon_large" />\n',
        good='<button className="button__icon--large" />\n',
        notes="Two-part kebab names (`card-active`) are also reported as a possible single-hyphen modifier.",
    ),
    "R5_MODIFIER_FORMAT": RuleExample(
        language="html",
        bad='<div class="card--"></div>\n<div class="--large"></div>\n',
        good='<div class="card--large"></div>\n',
    ),
}
