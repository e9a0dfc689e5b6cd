from typing import Any

from pydantic import SecretStr


def first_present(*values: Any) -> Any | None:
    for value in values:
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    return None


def mask_secret(secret: str | SecretStr | None = None, mask: str = "*") -> str | None:
    if secret is None:
        return None
    if isinstance(secret, SecretStr):
        secret = secret.get_secret_value()
    # short strings: mask all
    if len(secret) <= 4:
        return mask * len(secret)
    # medium strings: show one char on each side
    if len(secret) <= 8:
        return secret[0] + (mask * (len(secret) - 2)) + secret[-1:]
    # long strings: show 3 chars on each end with 5 masks in the middle
    return secret[:3] + (mask * 5) + secret[-3:]


def mask_in(text: str, secret: str | SecretStr) -> str:
    if isinstance(secret, SecretStr):
        secret = secret.get_secret_value()
    if not secret:
        return text
    return text.replace(secret, mask_secret(secret) or "")
