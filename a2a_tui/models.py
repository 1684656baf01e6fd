"""Shared model contracts for reader output and dashboard records."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass
class ReaderResult(Generic[T]):
    """Outcome of one data reader.

    ``value`` is ``None`` when the artifact is absent or unusable. ``errors``
    lists the individual files or records that were skipped on the way, so a
    present result may still carry errors.
    """

    source: str
    value: T | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def present(self) -> bool:
        return self.value is not None

    @classmethod
    def absent(cls, source: str, reason: str) -> "ReaderResult[T]":
        return cls(source=source, value=None, errors=[reason])

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "present": self.present,
            "errors": self.errors,
        }


@dataclass(frozen=True)
class AgentCard:
    uuid: str
    name: str
    description: str | None = None
    capabilities: list[str] | None = None

    @classmethod
    def from_dict(cls, payload: Any) -> "AgentCard":
        if not isinstance(payload, dict):
            raise ValueError("agent card must be a JSON object")
        uuid = payload.get("uuid")
        name = payload.get("name")
        if not isinstance(uuid, str) or not uuid:
            raise ValueError("agent card missing string 'uuid'")
        if not isinstance(name, str):
            raise ValueError("agent card missing string 'name'")

        description = payload.get("description")
        if description is not None and not isinstance(description, str):
            raise ValueError("'description' must be a string")

        capabilities = payload.get("capabilities")
        if capabilities is not None:
            if not isinstance(capabilities, list) or not all(isinstance(c, str) for c in capabilities):
                raise ValueError("'capabilities' must be a list of strings")
            capabilities = list(capabilities)

        return cls(uuid=uuid, name=name, description=description, capabilities=capabilities)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Alert:
    path: str
    message: str
    severity: str

    @property
    def level(self) -> str:
        severity = self.severity.upper()
        if severity in ("ERROR", "WARNING"):
            return severity
        return "INFO"

    @classmethod
    def from_dict(cls, payload: Any) -> "Alert":
        if not isinstance(payload, dict):
            raise ValueError("alert must be a JSON object")
        # semgrep --json nests message and severity under "extra"
        extra = payload.get("extra") if isinstance(payload.get("extra"), dict) else {}
        path = payload.get("path")
        message = payload.get("message", extra.get("message"))
        severity = payload.get("severity", extra.get("severity"))
        for label, value in (("path", path), ("message", message), ("severity", severity)):
            if not isinstance(value, str):
                raise ValueError(f"alert missing string '{label}'")
        return cls(path=path, message=message, severity=severity)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
