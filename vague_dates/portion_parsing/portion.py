"""Dataclass representing one classified half of a vague date."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Portion:
    """The start or end half of a vague date after classification.

    code is one of D, O, Y, P, U, or "" when the half is absent or could not
    be read. normalised_text is the canonical spelling the decoder expects.
    """
    text: str
    code: str
    normalised_text: str
    year: int | None = None

    @property
    def is_absent(self) -> bool:
        return not self.code
