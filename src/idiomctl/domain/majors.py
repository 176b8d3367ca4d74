"""Bounded-choice dispatch — canned replies keyed by a student's major.

Matching is exact and case-sensitive.
"""

from __future__ import annotations

from enum import StrEnum


class Major(StrEnum):
    """Majors with a dedicated reply, in match order."""

    BIOLOGY = "Biology"
    COMPUTER_SCIENCE = "Computer Science"
    ENGLISH = "English"
    MATH = "Math"


RESPONSES: dict[Major, str] = {
    Major.BIOLOGY: "Biology, huh? Hope you like memorizing the Krebs cycle.",
    Major.COMPUTER_SCIENCE: "Computer Science! Have you tried turning it off and on again?",
    Major.ENGLISH: "English? So you'll be correcting everyone's grammar from now on.",
    Major.MATH: "Math! Brace yourself for a lot of proofs.",
}

DEFAULT_RESPONSE = "That's a major I don't know much about. Tell me more!"


def respond(major: str) -> str:
    """Return the canned reply for *major*, or the default reply.

    Examples:
        >>> respond("Math")
        'Math! Brace yourself for a lot of proofs.'
        >>> respond("math") == DEFAULT_RESPONSE
        True
    """
    match major:
        case Major.BIOLOGY:
            return RESPONSES[Major.BIOLOGY]
        case Major.COMPUTER_SCIENCE:
            return RESPONSES[Major.COMPUTER_SCIENCE]
        case Major.ENGLISH:
            return RESPONSES[Major.ENGLISH]
        case Major.MATH:
            return RESPONSES[Major.MATH]
        case _:
            return DEFAULT_RESPONSE
