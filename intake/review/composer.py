"""
Review composition: turns an accepted form snapshot into ordered display lines.
"""
from intake.config.loader import CheckboxGroup, ChoiceGroup, FormConfig
from intake.models import FormInput, ReviewLine, ReviewModel
from intake.settings import get_settings
from intake.validators.normalizers import display_value


def compose_review(form: FormInput, config: FormConfig) -> ReviewModel:
    """
    Lines come out in this order: reviewable fields, single-choice groups,
    yes/no question groups, checkbox summaries. Empty fields and unanswered
    groups are skipped; checkbox summaries are always present.
    """
    mask_secrets = get_settings().mask_password_in_review
    lines: list[ReviewLine] = []

    for fid, rule in config.fields.items():
        if not rule.review:
            continue
        value = form.value(fid)
        if not value:
            continue
        lines.append(ReviewLine(label=rule.label, value=display_value(value, rule, mask_secrets)))

    for group in config.choice_groups + config.question_groups:
        line = _choice_line(form, group)
        if line is not None:
            lines.append(line)

    for boxes in config.checkbox_groups:
        lines.append(_checkbox_line(form, boxes))

    return ReviewModel(lines=lines)


def _choice_line(form: FormInput, group: ChoiceGroup):
    selected = form.choices.get(group.id)
    if not selected:
        return None
    # a value the group does not offer means nothing in it is selected
    if group.options and selected not in group.options:
        return None
    return ReviewLine(label=group.label, value=selected)


def _checkbox_line(form: FormInput, group: CheckboxGroup) -> ReviewLine:
    checked = set(form.checked)
    values = [value for box_id, value in group.boxes if box_id in checked]
    return ReviewLine(label=group.label, value=", ".join(values) or group.empty)
