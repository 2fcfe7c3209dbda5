"""Layout engine: progress markers, row arrangement, and sign composition."""

from metro_signs.layout.arrange import (
    AnchorNotFoundError,
    AnchorShapeError,
    LayoutError,
    LengthError,
    ParityError,
    arrange_row,
)
from metro_signs.layout.composer import DEFAULT_POLICY, Sign, SignPolicy, compose_signs
from metro_signs.layout.status import StatusMarker, resolve_status

__all__ = [
    "AnchorNotFoundError",
    "AnchorShapeError",
    "DEFAULT_POLICY",
    "LayoutError",
    "LengthError",
    "ParityError",
    "Sign",
    "SignPolicy",
    "StatusMarker",
    "arrange_row",
    "compose_signs",
    "resolve_status",
]
