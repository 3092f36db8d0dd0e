"""Component result dataclasses.

Uniform result envelope returned from every invocation, carrying either a
payload or a localized error.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from infrastructure.operations.status import ErrorKind


@dataclass
class ComponentError:
    """Localized failure description.

    Attributes:
        kind: ErrorKind -- failure classification
        message: str -- message already resolved in the request locale
        msg_key: Optional[str] -- translation key the message came from
        details: Optional[dict] -- structured diagnostics (parser errors, line/column)
    """

    kind: ErrorKind
    message: str
    msg_key: Optional[str] = None
    details: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize, omitting unset optional fields."""
        data: Dict[str, Any] = {"kind": self.kind.value}
        if self.msg_key is not None:
            data["msg_key"] = self.msg_key
        data["message"] = self.message
        if self.details is not None:
            data["details"] = self.details
        return data


@dataclass
class ComponentResult:
    """Result returned from an invocation.

    Attributes:
        payload: Any -- rendered output; None on failure
        state_updates: dict -- state changes to persist (always empty here)
        control: Optional[dict] -- routing side channel; None on failure
        error: Optional[ComponentError] -- set on failure only

    Raises:
        ValueError: If both a payload and an error are given.
    """

    payload: Any = None
    state_updates: Dict[str, Any] = field(default_factory=dict)
    control: Optional[Dict[str, Any]] = None
    error: Optional[ComponentError] = None

    def __post_init__(self) -> None:
        if self.payload is not None and self.error is not None:
            raise ValueError("A result carries either a payload or an error, not both")

    @property
    def is_success(self) -> bool:
        return self.error is None

    @classmethod
    def success(
        cls, payload: Any, control: Optional[Dict[str, Any]] = None
    ) -> "ComponentResult":
        """Create a successful result.

        Args:
            payload: Rendered output
            control: Optional routing side channel

        Returns:
            ComponentResult without error
        """
        return cls(payload=payload, control=control)

    @classmethod
    def failure(cls, error: ComponentError) -> "ComponentResult":
        """Create a failed result.

        Failures never carry a payload or control side effects.

        Args:
            error: Localized error

        Returns:
            ComponentResult with empty state updates and no control
        """
        return cls(payload=None, state_updates={}, control=None, error=error)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "payload": self.payload,
            "state_updates": dict(self.state_updates),
            "control": self.control,
            "error": self.error.to_dict() if self.error is not None else None,
        }
