"""Fixed value sets shared by the models and schemas."""
import enum


class GameType(str, enum.Enum):
    """Product line a game item belongs to."""

    GOSTOP = "gostop"
    POKER = "poker"


class OAuthProvider(str, enum.Enum):
    """Third-party identity providers users can sign in with."""

    GOOGLE = "google"
    APPLE = "apple"


class PurchaseStatus(str, enum.Enum):
    """Lifecycle states of a purchase."""

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


def enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    """Persist enum values rather than member names."""
    return [member.value for member in enum_cls]
