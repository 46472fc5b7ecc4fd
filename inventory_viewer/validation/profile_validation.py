from __future__ import annotations

from collections import Counter

from inventory_viewer.core.query import QueryProfile
from inventory_viewer.core.record import FIELD_NAMES
from inventory_viewer.validation.errors import ValidationError, ValidationIssue


def validate_profile(profile: QueryProfile) -> None:
    """
    Check a QueryProfile against the record schema, collecting every
    problem before raising.
    """
    issues: list[ValidationIssue] = []

    if not profile.search_fields:
        issues.append(ValidationIssue("PROFILE_NO_SEARCH_FIELDS", "At least one search field is required."))

    for name in profile.search_fields:
        if name not in FIELD_NAMES:
            issues.append(ValidationIssue("PROFILE_SEARCH_FIELD", f"search field '{name}' is not a known column."))

    for name in profile.filter_fields:
        if name not in FIELD_NAMES:
            issues.append(ValidationIssue("PROFILE_FILTER_FIELD", f"filter field '{name}' is not a known column."))

    for name, count in Counter(profile.filter_fields).items():
        if count > 1:
            issues.append(ValidationIssue("PROFILE_DUPLICATE_FILTER", f"filter field '{name}' is declared {count} times."))

    if issues:
        raise ValidationError(issues)
