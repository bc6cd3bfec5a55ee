"""
YAML form definition loader. One YAML per form_type.
"""
import os
import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional

import yaml

CONFIG_DIR = os.path.join(os.path.dirname(__file__))


class UnknownFieldError(KeyError):
    pass


@dataclass(frozen=True)
class FieldRule:
    id: str
    label: str
    pattern: str
    required: bool
    normalizers: tuple[str, ...] = ()
    review: bool = True
    display: Optional[str] = None

    @property
    def compiled_pattern(self) -> re.Pattern:
        return _compile(self.pattern)


@dataclass(frozen=True)
class ChoiceGroup:
    id: str
    label: str
    options: tuple[str, ...] = ()


@dataclass(frozen=True)
class CheckboxGroup:
    id: str
    label: str
    boxes: tuple[tuple[str, str], ...]
    empty: str = "None"


@dataclass(frozen=True)
class FormConfig:
    form_type: str
    fields: dict[str, FieldRule]
    choice_groups: tuple[ChoiceGroup, ...] = ()
    question_groups: tuple[ChoiceGroup, ...] = ()
    checkbox_groups: tuple[CheckboxGroup, ...] = ()
    jurisdictions: tuple[str, ...] = field(default_factory=tuple)

    def rule(self, field_id: str) -> FieldRule:
        try:
            return self.fields[field_id]
        except KeyError:
            raise UnknownFieldError(field_id) from None


@lru_cache(maxsize=None)
def _compile(pattern: str) -> re.Pattern:
    # \d and \w are ASCII-only, as in the browser's RegExp
    return re.compile(pattern, re.ASCII)


def _question_label(group_id: str) -> str:
    return group_id[:1].upper() + group_id[1:]


@lru_cache(maxsize=32)
def load_config(form_type: str) -> FormConfig:
    config_path = os.path.join(CONFIG_DIR, f"{form_type}.yaml")
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"No config found for form_type={form_type}")

    with open(config_path) as f:
        raw = yaml.safe_load(f)

    fields = {}
    for fid, fdata in raw.get("fields", {}).items():
        fields[fid] = FieldRule(
            id=fid,
            label=fdata.get("label", fid),
            pattern=fdata.get("pattern", ""),
            required=fdata.get("required", False),
            normalizers=tuple(fdata.get("normalizers", [])),
            review=fdata.get("review", True),
            display=fdata.get("display"),
        )

    choice_groups = tuple(
        ChoiceGroup(id=gid, label=gdata.get("label", gid), options=tuple(gdata.get("options", [])))
        for gid, gdata in raw.get("choice_groups", {}).items()
    )

    # Question groups are labelled by their identifier, capitalized.
    question_groups = tuple(
        ChoiceGroup(id=gid, label=_question_label(gid), options=tuple((gdata or {}).get("options", [])))
        for gid, gdata in raw.get("question_groups", {}).items()
    )

    checkbox_groups = tuple(
        CheckboxGroup(
            id=gid,
            label=gdata.get("label", gid),
            boxes=tuple((box_id, str(value)) for box_id, value in gdata.get("boxes", {}).items()),
            empty=str(gdata.get("empty", "None")),
        )
        for gid, gdata in raw.get("checkbox_groups", {}).items()
    )

    return FormConfig(
        form_type=raw.get("form_type", form_type),
        fields=fields,
        choice_groups=choice_groups,
        question_groups=question_groups,
        checkbox_groups=checkbox_groups,
        jurisdictions=tuple(str(code) for code in raw.get("jurisdictions", [])),
    )
