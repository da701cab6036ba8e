from typing import Any

from pydantic import BaseModel, Field


class TraceStep(BaseModel):
    """Single step in the sampling trace."""

    step: str = Field(description="Step identifier, e.g., 'draw_0'")
    choice: str = Field(
        description="Human-readable description of what was chosen"
    )
    value: Any = Field(description="The actual sampled value (serializable)")


class GenerationTrace(BaseModel):
    """Complete trace of a generation run."""

    policy: str = Field(description="Length policy the run was measured under")
    steps: list[TraceStep] = Field(
        default_factory=list, description="Ordered list of sampling steps"
    )


def trace_step(
    trace: list[TraceStep] | None, step: str, choice: str, value: Any
) -> None:
    if trace is not None:
        trace.append(TraceStep(step=step, choice=choice, value=value))
