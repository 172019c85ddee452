"""Email address format rules."""

from protean.exceptions import ValidationError

_FORBIDDEN = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


def validate_email_address(email: str, field: str = "email") -> str:
    """Return the address unchanged if it is structurally valid, raise ValidationError otherwise.

    Enforces exactly one @, non-empty local and domain parts, a dotted domain,
    no consecutive dots, no whitespace and none of the characters RFC 5322
    reserves for quoting.
    """
    error = ValidationError({field: ["Please provide a valid email"]})

    if not email or any(ch in email for ch in (" ", "\t", "\n")):
        raise error

    if email.count("@") != 1:
        raise error

    local_part, domain_part = email.split("@", 1)

    if not local_part or local_part.startswith(".") or local_part.endswith("."):
        raise error

    if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
        raise error

    if "." not in domain_part or ".." in local_part or ".." in domain_part:
        raise error

    for label in domain_part.split("."):
        if label.startswith("-") or label.endswith("-"):
            raise error

    if any(ch in email for ch in _FORBIDDEN):
        raise error

    return email
