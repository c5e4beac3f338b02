"""Validator configuration model."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import FlowMode


class ValidatorConfig(BaseModel):
    """Configuration for validating tunnel update requests."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    check_flow_mode: bool = Field(
        default=True, description="Reject flow values outside flow_modes"
    )
    flow_modes: frozenset[int] = Field(
        default=frozenset(FlowMode), description="Recognized accounting modes"
    )
    log_rejections: bool = Field(default=True, description="Log rejected requests")

    @field_validator("flow_modes")
    @classmethod
    def validate_flow_modes(cls, v: frozenset[int]) -> frozenset[int]:
        """Ensure at least one accounting mode is recognized."""
        if not v:
            raise ValueError("At least one flow mode must be configured")
        return v
