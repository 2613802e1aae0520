from __future__ import annotations

import logging
import re
from dataclasses import replace
from typing import Callable, Dict, Optional, Tuple

from viewstate.models import ContactFormState, FieldState
from viewstate.observable import Observable


FIELD_NAMES: Tuple[str, ...] = ("name", "email", "message")

# Same shape browsers and most form libraries accept: dotted local part, '@',
# then dot-separated host labels of at most 63 chars.
EMAIL_PATTERN = re.compile(
    r"^(?=.{1,254}$)(?=.{1,64}@)"
    r"[a-zA-Z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[a-zA-Z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)


def _text_length(value: str) -> int:
    """Length in UTF-16 code units, as browsers count form input."""
    return len(value.encode("utf-16-le", errors="surrogatepass")) // 2


STATUS_TEMPLATE = "Merci {name}, je reviens vers vous rapidement !"

logger = logging.getLogger(__name__)

# A rule returns its error code when `value` fails, else None.
Rule = Callable[[str], Optional[str]]


def required(value: str) -> Optional[str]:
    return "required" if value == "" else None


def min_length(n: int) -> Rule:
    def rule(value: str) -> Optional[str]:
        # Empty values are reported by `required` alone.
        if value == "" or _text_length(value) >= n:
            return None
        return "minlength"

    return rule


def email(value: str) -> Optional[str]:
    if value == "" or EMAIL_PATTERN.fullmatch(value):
        return None
    return "email"


FIELD_RULES: Dict[str, Tuple[Rule, ...]] = {
    "name": (required, min_length(2)),
    "email": (required, email),
    "message": (required, min_length(10)),
}


def validate_field(name: str, value: str) -> Tuple[str, ...]:
    """Return the error codes of every rule `value` fails for field `name`."""
    try:
        rules = FIELD_RULES[name]
    except KeyError:
        raise ValueError(f"Unknown contact field: {name!r}") from None
    return tuple(code for code in (rule(value) for rule in rules) if code is not None)


def _empty_field(name: str) -> FieldState:
    return FieldState(value="", touched=False, errors=validate_field(name, ""))


def empty_form() -> ContactFormState:
    return ContactFormState(
        name=_empty_field("name"),
        email=_empty_field("email"),
        message=_empty_field("message"),
    )


class ContactForm:
    """
    Client-side contact form: per-field validation plus a local submit/reset cycle.

    Nothing is sent anywhere. A valid submit only composes an acknowledgment
    message and clears the fields.
    """

    def __init__(self) -> None:
        self.state: Observable[ContactFormState] = Observable(empty_form())

    @property
    def valid(self) -> bool:
        return self.state.value.form_valid

    @property
    def status_message(self) -> str:
        return self.state.value.status_message

    def field(self, name: str) -> FieldState:
        self._check_name(name)
        return getattr(self.state.value, name)

    # --------------- Public API ---------------
    def update_field(self, name: str, value: str) -> None:
        current = self.field(name)
        updated = replace(current, value=value, errors=validate_field(name, value))
        self.state.set(replace(self.state.value, **{name: updated}))

    def touch(self, name: str) -> None:
        """Mark a field as interacted with (e.g. on blur)."""
        current = self.field(name)
        if not current.touched:
            self.state.set(replace(self.state.value, **{name: replace(current, touched=True)}))

    def submit(self) -> bool:
        """
        Attempt a submit; return True when the form was valid.

        - Invalid: every field becomes touched, values are kept, no status message.
        - Valid: status message greets the sender by name, fields are reset.
        """
        state = replace(self.state.value, status_message="")
        if not state.form_valid:
            self.state.set(
                replace(
                    state,
                    name=replace(state.name, touched=True),
                    email=replace(state.email, touched=True),
                    message=replace(state.message, touched=True),
                )
            )
            logger.debug("Contact submit rejected: form invalid")
            return False

        status = STATUS_TEMPLATE.format(name=state.name.value)
        self.state.set(replace(empty_form(), status_message=status))
        logger.info("Contact form submitted locally")
        return True

    def reset(self) -> None:
        """Clear all fields and touched flags; the status message is kept."""
        self.state.set(replace(empty_form(), status_message=self.state.value.status_message))

    @staticmethod
    def _check_name(name: str) -> None:
        if name not in FIELD_NAMES:
            raise ValueError(f"Unknown contact field: {name!r}")


__all__ = [
    "ContactForm",
    "EMAIL_PATTERN",
    "FIELD_NAMES",
    "FIELD_RULES",
    "STATUS_TEMPLATE",
    "email",
    "empty_form",
    "min_length",
    "required",
    "validate_field",
]
