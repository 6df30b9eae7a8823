from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Literal

ModelStatus = Literal["success", "recoverable_error", "fatal_error"]


@dataclass(frozen=True)
class GenerationPrompt:
    system_instruction: str    # brand/style contract, identical for every backend
    user_prompt: str           # the admin's free-text request
    trace_id: Optional[str] = None


@dataclass(frozen=True)
class GeneratedContent:
    subject: str
    body: str


@dataclass
class AttemptOutcome:
    status: ModelStatus
    content: Optional[GeneratedContent] = None
    reason: Optional[str] = None        # rate_limited | invalid key | malformed response | ...
    status_code: Optional[int] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return self.status == "success"

    @property
    def is_fatal(self) -> bool:
        return self.status == "fatal_error"

    @classmethod
    def success(cls, subject: str, body: str, **metadata: Any) -> "AttemptOutcome":
        return cls(
            status="success",
            content=GeneratedContent(subject=subject, body=body),
            metadata=metadata,
        )

    @classmethod
    def recoverable(
        cls, reason: str, status_code: Optional[int] = None, **metadata: Any
    ) -> "AttemptOutcome":
        return cls(
            status="recoverable_error",
            reason=reason,
            status_code=status_code,
            metadata=metadata,
        )

    @classmethod
    def fatal(
        cls, reason: str, status_code: Optional[int] = None, **metadata: Any
    ) -> "AttemptOutcome":
        return cls(
            status="fatal_error",
            reason=reason,
            status_code=status_code,
            metadata=metadata,
        )
