"""Email value object.

Provides validated email addresses for user identification.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email

from usermanagement.domain.user.exceptions import InvalidEmailError


@dataclass(frozen=True)
class Email:
    """Value object representing a validated email address.

    Syntax is checked with email-validator, the same rules the REST
    boundary applies, without any DNS lookup. The address keeps the
    casing it was given; ``normalized`` is the lower-cased form used for
    uniqueness checks and lookups.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            msg = "Email cannot be empty"
            raise InvalidEmailError(msg)

        stripped = self.value.strip()

        try:
            validate_email(stripped, check_deliverability=False)
        except EmailNotValidError as e:
            msg = f"Invalid email format: {self.value}"
            raise InvalidEmailError(msg) from e

        # Replace value with stripped version (frozen dataclass workaround)
        object.__setattr__(self, "value", stripped)

    @property
    def normalized(self) -> str:
        return self.value.lower()

    def matches(self, other: "str | Email") -> bool:
        """Case-insensitive comparison with another address."""
        other_value = other.value if isinstance(other, Email) else other.strip()
        return self.normalized == other_value.lower()

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
