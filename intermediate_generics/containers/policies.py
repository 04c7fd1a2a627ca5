from __future__ import annotations

from enum import Enum


class RemovalPolicy(str, Enum):
    CLAMP = "clamp"
    SIGNED = "signed"


def coerce_removal_policy(value: RemovalPolicy | str) -> RemovalPolicy:
    if isinstance(value, RemovalPolicy):
        return value
    normalized = str(value).strip().lower()
    try:
        return RemovalPolicy(normalized)
    except ValueError:
        allowed = ", ".join(policy.value for policy in RemovalPolicy)
        msg = f"Unknown removal policy '{value}'. Expected one of: {allowed}."
        raise ValueError(msg) from None
