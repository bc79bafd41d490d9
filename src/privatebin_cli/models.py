"""Models for paste options, requests, responses and result URLs."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .types import ValidationError


class Expiration(Enum):
    """Expiration classes accepted by the server."""
    FIVE_MINUTES = "5min"
    TEN_MINUTES = "10min"
    ONE_HOUR = "1hour"
    ONE_DAY = "1day"
    ONE_WEEK = "1week"
    ONE_MONTH = "1month"
    ONE_YEAR = "1year"
    NEVER = "never"


class Formatter(Enum):
    """Display formats accepted by the server."""
    PLAINTEXT = "plaintext"
    SYNTAX_HIGHLIGHTING = "syntaxhighlighting"
    MARKDOWN = "markdown"


class Protocol(Enum):
    """Schemes a server can be reached over."""
    HTTP = "http"
    HTTPS = "https"

    @property
    def default_port(self) -> int:
        """Port implied by the scheme when none is shown in a URL."""
        return 80 if self is Protocol.HTTP else 443


def parse_choice(enum_type, value: str, label: str):
    """
    Look up an enum member by its wire value.

    Raises:
        ValidationError: If value is not one of the enum's values
    """
    try:
        return enum_type(value)
    except ValueError:
        choices = ", ".join(member.value for member in enum_type)
        raise ValidationError(f"{label} must be one of: {choices} (got {value!r})") from None


@dataclass(frozen=True)
class PasteOptions:
    """Server-side handling requested for a paste."""
    expiration: Expiration = Expiration.NEVER
    formatter: Formatter = Formatter.PLAINTEXT
    burn_after_reading: bool = False
    open_discussion: bool = False

    @classmethod
    def from_values(
        cls,
        expiration: str = Expiration.NEVER.value,
        formatter: str = Formatter.PLAINTEXT.value,
        burn_after_reading: bool = False,
        open_discussion: bool = False,
    ) -> "PasteOptions":
        """Builds options from wire strings, validating the enumerations."""
        return cls(
            expiration=parse_choice(Expiration, expiration, "Expiration"),
            formatter=parse_choice(Formatter, formatter, "Format"),
            burn_after_reading=bool(burn_after_reading),
            open_discussion=bool(open_discussion),
        )


@dataclass(frozen=True)
class PasteRequest:
    """A paste ready to be posted: serialized envelope plus options."""
    data: str
    options: PasteOptions

    def to_form(self) -> dict[str, str]:
        """Form fields in the order the server documents them."""
        return {
            "data": self.data,
            "expire": self.options.expiration.value,
            "formatter": self.options.formatter.value,
            "burnafterreading": "1" if self.options.burn_after_reading else "0",
            "opendiscussion": "1" if self.options.open_discussion else "0",
        }


@dataclass
class PasteResponse:
    """Successful server answer to a paste submission."""
    status: int
    paste_id: str
    delete_token: Optional[str] = None


@dataclass(frozen=True)
class ResultUrls:
    """URLs handed back to the user after a successful paste."""
    view_url: str
    delete_url: Optional[str] = None

    def has_delete_url(self) -> bool:
        """Whether a delete URL was produced (not the case for burn-after-reading)."""
        return self.delete_url is not None
