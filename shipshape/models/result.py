"""Operation result models"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from ..constants import DeployPhase


class OperationStatus(Enum):
    """Operation status"""
    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED = "skipped"
    IN_PROGRESS = "in_progress"


@dataclass
class ErrorDetail:
    """Detailed error information"""

    code: str
    message: str
    context: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat()
        }


@dataclass
class Result:
    """Base result class"""

    status: OperationStatus
    message: str = ""
    errors: List[ErrorDetail] = field(default_factory=list)
    start_time: datetime = field(default_factory=datetime.now)
    end_time: Optional[datetime] = None

    @property
    def is_success(self) -> bool:
        """Check if operation was successful"""
        return self.status == OperationStatus.SUCCESS

    @property
    def is_failed(self) -> bool:
        """Check if operation failed"""
        return self.status == OperationStatus.FAILED

    @property
    def duration(self) -> Optional[float]:
        """Get operation duration in seconds"""
        if self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return None

    def add_error(self, code: str, message: str, **context) -> None:
        """Add an error"""
        self.errors.append(ErrorDetail(code=code, message=message, context=context))

    def complete(self, status: Optional[OperationStatus] = None) -> None:
        """Mark operation as complete"""
        self.end_time = datetime.now()
        if status:
            self.status = status


@dataclass
class PhaseResult:
    """Outcome of a single pipeline phase"""

    phase: DeployPhase
    status: OperationStatus = OperationStatus.IN_PROGRESS
    commands: List[str] = field(default_factory=list)
    message: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "phase": self.phase.value,
            "status": self.status.value,
        }
        if self.commands:
            data["commands"] = list(self.commands)
        if self.message:
            data["message"] = self.message
        return data


@dataclass
class DeployResult(Result):
    """Result of a deployment run"""

    source_path: Optional[str] = None
    destination_path: Optional[str] = None
    post_deploy_cwd: Optional[str] = None
    phases: List[PhaseResult] = field(default_factory=list)
    state: DeployPhase = DeployPhase.PRE_DEPLOY
    failed_phase: Optional[DeployPhase] = None
    kept: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    error: Optional[BaseException] = None

    def begin_phase(self, phase: DeployPhase) -> PhaseResult:
        """Enter a phase and record it"""
        self.state = phase
        phase_result = PhaseResult(phase=phase)
        self.phases.append(phase_result)
        return phase_result

    def get_phase(self, phase: DeployPhase) -> Optional[PhaseResult]:
        """Get the record of a phase if it was reached"""
        for phase_result in self.phases:
            if phase_result.phase == phase:
                return phase_result
        return None

    @property
    def executed_commands(self) -> List[str]:
        """Every command started during the run, in order"""
        commands = []
        for phase_result in self.phases:
            commands.extend(phase_result.commands)
        return commands

    def fail(self, error: BaseException) -> None:
        """Move to the failed state, recording where and why"""
        self.failed_phase = self.state
        self.state = DeployPhase.FAILED
        self.error = error
        if self.phases and self.phases[-1].status == OperationStatus.IN_PROGRESS:
            self.phases[-1].status = OperationStatus.FAILED
            self.phases[-1].message = str(error)
        self.add_error(
            getattr(error, "error_code", None) or "",
            str(error),
            phase=self.failed_phase.value
        )
        self.message = str(error)
        self.complete(OperationStatus.FAILED)

    def succeed(self) -> None:
        """Move to the done state"""
        self.state = DeployPhase.DONE
        self.complete(OperationStatus.SUCCESS)

    def raise_for_status(self) -> None:
        """Re-raise the recorded error if the run failed"""
        if self.error is not None:
            raise self.error

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "status": self.status.value,
            "message": self.message,
            "state": self.state.value,
            "failed_phase": self.failed_phase.value if self.failed_phase else None,
            "source_path": self.source_path,
            "destination_path": self.destination_path,
            "post_deploy_cwd": self.post_deploy_cwd,
            "phases": [p.to_dict() for p in self.phases],
            "kept": list(self.kept),
            "removed": list(self.removed),
            "errors": [e.to_dict() for e in self.errors],
            "duration": self.duration
        }
