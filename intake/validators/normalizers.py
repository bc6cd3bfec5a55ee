"""
Field value normalizers and review display transforms.
Normalizers run on every change of a field, before it is validated.
"""
from intake.config.loader import FieldRule


class NormalizationError(ValueError):
    pass


def normalize_value(raw: str, rule: FieldRule) -> str:
    """
    Apply normalizers sequentially as listed in the field rule.
    Returns normalized value.
    """
    value = raw
    for norm in rule.normalizers:
        if norm == "strip":
            value = value.strip()
        elif norm == "upper":
            value = value.upper()
        elif norm == "lower":
            value = value.lower()
        else:
            raise NormalizationError(f"Unknown normalizer {norm!r} on field {rule.id}")
    return value


def truncate_zip(value: str) -> str:
    """ZIP+4 -> base ZIP code ('12345-6789' -> '12345')."""
    value = value.strip()
    return value.split("-", 1)[0] if "-" in value else value


def mask(value: str) -> str:
    return "*" * len(value)


DISPLAY_TRANSFORMS = {
    "truncate_zip": truncate_zip,
    "mask": mask,
}


def display_value(value: str, rule: FieldRule, mask_secrets: bool = True) -> str:
    if rule.display is None:
        return value
    if rule.display == "mask" and not mask_secrets:
        return value
    transform = DISPLAY_TRANSFORMS.get(rule.display)
    if transform is None:
        raise NormalizationError(f"Unknown display transform {rule.display!r} on field {rule.id}")
    return transform(value)
