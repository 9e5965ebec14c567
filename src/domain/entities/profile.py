"""Profile domain entities.

``ProfileRecord`` is what the store holds. ``ProfileDraft`` is the mutable
edit session bound to a form; it only reaches the store through a commit,
which goes through ``DraftSnapshot`` and ``ProfileUpdate``.
"""

from dataclasses import dataclass, fields
from datetime import date, datetime
from typing import Optional
from uuid import UUID

EDITABLE_FIELDS: tuple[str, ...] = (
    "full_name",
    "email",
    "date_of_birth",
    "user_role",
    "gender",
    "avatar_url",
)


@dataclass
class ProfileRecord:
    """Domain entity for a persisted user profile."""

    id: UUID
    email: str
    full_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    user_role: Optional[str] = None
    gender: Optional[str] = None
    avatar_url: Optional[str] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True, slots=True)
class ProfileUpdate:
    """Normalized full-record write, ready for an upsert.

    ``None`` means the column is cleared; there are no empty strings here.
    """

    email: str
    updated_at: datetime
    full_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    user_role: Optional[str] = None
    gender: Optional[str] = None
    avatar_url: Optional[str] = None


@dataclass(frozen=True, slots=True)
class DraftSnapshot:
    """Read-only copy of a draft taken at a single instant."""

    full_name: str = ""
    email: str = ""
    date_of_birth: str = ""
    user_role: str = ""
    gender: str = ""
    avatar_url: str = ""

    def as_dict(self) -> dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class ProfileDraft:
    """In-progress edit state for one profile.

    Every field is a string; ``""`` is the form's representation of unset.
    """

    full_name: str = ""
    email: str = ""
    date_of_birth: str = ""
    user_role: str = ""
    gender: str = ""
    avatar_url: str = ""

    @classmethod
    def blank(cls, email: str = "") -> "ProfileDraft":
        """Defaults for a user with no stored record yet."""
        return cls(email=email)

    @classmethod
    def from_record(cls, record: ProfileRecord, fallback_email: str = "") -> "ProfileDraft":
        """Hydrate a draft from a stored record, mapping absent values to ``""``."""
        return cls(
            full_name=record.full_name or "",
            email=record.email or fallback_email,
            date_of_birth=record.date_of_birth.isoformat() if record.date_of_birth else "",
            user_role=record.user_role or "",
            gender=record.gender or "",
            avatar_url=record.avatar_url or "",
        )

    def set(self, name: str, value: str) -> None:
        """Replace a single editable field."""
        if name not in EDITABLE_FIELDS:
            raise ValueError(f"Unknown profile field: {name}")
        setattr(self, name, value)

    def snapshot(self) -> DraftSnapshot:
        return DraftSnapshot(**{name: getattr(self, name) for name in EDITABLE_FIELDS})

    def restore(self, snapshot: DraftSnapshot) -> None:
        """Overwrite every field from ``snapshot``."""
        for name, value in snapshot.as_dict().items():
            setattr(self, name, value)

    def initials(self, fallback_email: str = "") -> str:
        """Avatar placeholder letters: name initials, else email initial, else ``U``."""
        names = self.full_name.split()
        if len(names) >= 2:
            return f"{names[0][0]}{names[1][0]}".upper()
        if names:
            return names[0][0].upper()
        email = self.email or fallback_email
        if email:
            return email[0].upper()
        return "U"


def normalize_snapshot(
    snapshot: DraftSnapshot, email: str, updated_at: datetime
) -> ProfileUpdate:
    """Turn a draft snapshot into a full-record write.

    Empty strings become ``None`` so that clearing a field deletes it.
    ``email`` is the authoritative session email and always wins over the
    draft's copy. Raises ``ValueError`` for a malformed ``date_of_birth``.
    """
    values = {name: (value or None) for name, value in snapshot.as_dict().items()}
    raw_date = values.pop("date_of_birth")
    values.pop("email")
    return ProfileUpdate(
        email=email,
        updated_at=updated_at,
        date_of_birth=date.fromisoformat(raw_date) if raw_date else None,
        **values,
    )
