"""
Data models for onboarding submissions and status.

Optional fields distinguish between a key that was never sent (``ABSENT``)
and a key sent as JSON null (``None``). Both directions of serialization
keep that distinction.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from . import choices

logger = logging.getLogger(__name__)


class _Absent(Enum):
    """Marker type for an optional field that is not present on the wire."""
    ABSENT = "absent"

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent.ABSENT

OptionalText = Union[str, None, _Absent]
OptionalFlag = Union[bool, None, _Absent]


class OnboardingState(Enum):
    """Where a user stands in the onboarding flow, as seen by a caller."""
    UNKNOWN = "unknown"  # Status not fetched yet
    INCOMPLETE = "incomplete"
    COMPLETE = "complete"

    @classmethod
    def from_status(cls, status: Optional["OnboardingStatus"]) -> "OnboardingState":
        """Map a fetched status (or None if not fetched yet) to a state."""
        if status is None:
            return cls.UNKNOWN
        return cls.COMPLETE if status.onboarding_completed else cls.INCOMPLETE


def _required_text(data: dict, key: str) -> str:
    if key not in data:
        raise ValueError(f"'{key}' is required")
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _optional(data: dict, key: str, expected: type):
    if key not in data:
        return ABSENT
    value = data[key]
    if value is None or isinstance(value, expected):
        return value
    raise ValueError(
        f"'{key}' must be {expected.__name__} or null, got {type(value).__name__}"
    )


@dataclass(frozen=True)
class OnboardingData:
    """
    One user's answers to the onboarding questionnaire.

    The four required answers are categorical values defined by the backend
    and are kept as opaque text. No validation happens on construction; see
    ``validation.validate_onboarding_data`` for an optional local check.
    """
    primary_goal: str
    biggest_challenge: str
    work_style: str
    focus_area: str

    # Optional answers
    first_goal: OptionalText = ABSENT
    wants_buddy: OptionalFlag = ABSENT
    buddy_email: OptionalText = ABSENT

    # Python attribute -> wire key
    FIELD_NAMES = {
        "primary_goal": "primaryGoal",
        "biggest_challenge": "biggestChallenge",
        "work_style": "workStyle",
        "focus_area": "focusArea",
        "first_goal": "firstGoal",
        "wants_buddy": "wantsBuddy",
        "buddy_email": "buddyEmail",
    }

    @classmethod
    def from_answers(
        cls,
        primary_goal: str,
        biggest_challenge: str,
        work_style: str,
        focus_area: str,
        first_goal: str = "",
        wants_buddy: bool = False,
        buddy_email: str = "",
    ) -> "OnboardingData":
        """
        Build a submission from questionnaire answers.

        Blank free-text answers are sent as explicit nulls and ``wants_buddy``
        is always sent, matching what the questionnaire posts.

        Args:
            primary_goal: Selected primary goal value
            biggest_challenge: Selected challenge value
            work_style: Selected work style value
            focus_area: Selected focus area value
            first_goal: Free-text first goal, may be blank
            wants_buddy: Whether the user opted into an accountability buddy
            buddy_email: Buddy's email address, may be blank

        Returns:
            OnboardingData ready to submit
        """
        return cls(
            primary_goal=primary_goal,
            biggest_challenge=biggest_challenge,
            work_style=work_style,
            focus_area=focus_area,
            first_goal=first_goal or None,
            wants_buddy=wants_buddy,
            buddy_email=buddy_email or None,
        )

    @property
    def wants_buddy_enabled(self) -> bool:
        """True only if the user explicitly opted into a buddy."""
        return self.wants_buddy is True

    def to_dict(self) -> dict:
        """Convert to the wire payload, omitting absent optional fields."""
        data = {}
        for attr, key in self.FIELD_NAMES.items():
            value = getattr(self, attr)
            if value is not ABSENT:
                data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "OnboardingData":
        """
        Create from a wire payload.

        Raises:
            ValueError: If the payload does not have the expected shape
        """
        if not isinstance(data, dict):
            raise ValueError(f"onboarding data must be an object, got {type(data).__name__}")
        return cls(
            primary_goal=_required_text(data, "primaryGoal"),
            biggest_challenge=_required_text(data, "biggestChallenge"),
            work_style=_required_text(data, "workStyle"),
            focus_area=_required_text(data, "focusArea"),
            first_goal=_optional(data, "firstGoal", str),
            wants_buddy=_optional(data, "wantsBuddy", bool),
            buddy_email=_optional(data, "buddyEmail", str),
        )

    def get_summary(self) -> str:
        """Get a human-readable summary of the answers."""
        lines = [
            f"*Primary goal:* {choices.label_for(choices.PRIMARY_GOALS, self.primary_goal)}",
            f"*Biggest challenge:* {choices.label_for(choices.BIGGEST_CHALLENGES, self.biggest_challenge)}",
            f"*Work style:* {choices.label_for(choices.WORK_STYLES, self.work_style)}",
            f"*Focus area:* {choices.label_for(choices.FOCUS_AREAS, self.focus_area)}",
        ]

        if self.first_goal:
            lines.append(f"*First goal:* {self.first_goal}")

        if self.wants_buddy_enabled:
            lines.append(f"*Buddy:* {self.buddy_email or 'Not provided'}")

        return "\n".join(lines)


@dataclass(frozen=True)
class OnboardingStatus:
    """
    Result of querying a user's onboarding state.

    ``onboarding_data`` is None whenever ``onboarding_completed`` is False.
    A completed status may still carry no data if the backend withholds it.
    """
    onboarding_completed: bool
    onboarding_data: Optional[OnboardingData] = None

    @property
    def state(self) -> OnboardingState:
        return OnboardingState.from_status(self)

    def to_dict(self) -> dict:
        return {
            "onboardingCompleted": self.onboarding_completed,
            "onboardingData": self.onboarding_data.to_dict() if self.onboarding_data is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "OnboardingStatus":
        """
        Create from a status response body.

        Raises:
            ValueError: If ``onboardingCompleted`` is missing or not a boolean,
                or ``onboardingData`` is not a valid submission
        """
        if not isinstance(data, dict):
            raise ValueError(f"status must be an object, got {type(data).__name__}")
        if "onboardingCompleted" not in data:
            raise ValueError("'onboardingCompleted' is required")

        completed = data["onboardingCompleted"]
        if not isinstance(completed, bool):
            raise ValueError(
                f"'onboardingCompleted' must be a boolean, got {type(completed).__name__}"
            )

        raw = data.get("onboardingData")
        if raw is None:
            return cls(onboarding_completed=completed)

        if not completed:
            logger.warning("Discarding onboarding data sent with an incomplete status")
            return cls(onboarding_completed=False)

        return cls(
            onboarding_completed=True,
            onboarding_data=OnboardingData.from_dict(raw),
        )
