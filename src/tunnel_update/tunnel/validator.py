"""Validation of incoming tunnel update payloads."""

from collections.abc import Mapping
from typing import Any

import pydantic
from pydantic_core import ErrorDetails

from ..common.exceptions import ConfigurationError, ValidationError, Violation
from ..common.logging import get_logger
from ..common.utils import format_location
from .config import ValidatorConfig
from .request import TunnelUpdateRequest

logger = get_logger(__name__)

REQUIRED_FIELDS = ("id", "name", "flow")
BODY_FIELD = "body"

_RANGE_ERRORS = {
    "greater_than",
    "greater_than_equal",
    "less_than",
    "less_than_equal",
    "finite_number",
}

_WIRE_NAMES = {
    name: field.alias or name
    for name, field in TunnelUpdateRequest.model_fields.items()
}


def _to_violation(error: ErrorDetails) -> Violation:
    loc = error["loc"]
    if not loc:
        return Violation(BODY_FIELD, error["msg"])

    field = format_location(loc, _WIRE_NAMES)
    error_type = error["type"]
    top_level = len(loc) == 1

    if top_level and field in REQUIRED_FIELDS:
        if error_type == "missing" or error.get("input") is None:
            return Violation(field, f"{field} required")
        if field == "name" and error_type == "string_too_short":
            return Violation(field, "name required")
        if field == "id" and error_type in _RANGE_ERRORS:
            return Violation(field, "id out of range")

    if top_level and field == "trafficRatio" and error_type in _RANGE_ERRORS:
        return Violation(field, "trafficRatio out of range")

    return Violation(field, error["msg"])


class TunnelUpdateValidator:
    """Turns raw update payloads into accepted requests or violations."""

    def __init__(self, config: ValidatorConfig | Mapping[str, Any] | None = None) -> None:
        """Initialize validator.

        Args:
            config: Validator configuration, or a mapping of its fields

        Raises:
            ConfigurationError: If the configuration mapping is invalid
        """
        if config is None:
            config = ValidatorConfig()
        elif not isinstance(config, ValidatorConfig):
            try:
                config = ValidatorConfig.model_validate(config)
            except pydantic.ValidationError as e:
                raise ConfigurationError(f"Invalid validator configuration: {e}") from e

        self.config = config
        logger.debug(
            "TunnelUpdateValidator initialized",
            check_flow_mode=config.check_flow_mode,
            flow_modes=sorted(config.flow_modes),
        )

    @property
    def _context(self) -> dict[str, Any]:
        return {
            "check_flow_mode": self.config.check_flow_mode,
            "flow_modes": self.config.flow_modes,
        }

    def _parse(self, payload: Mapping[str, Any] | str | bytes) -> TunnelUpdateRequest:
        if isinstance(payload, (str, bytes, bytearray)):
            return TunnelUpdateRequest.model_validate_json(
                payload, context=self._context
            )
        return TunnelUpdateRequest.model_validate(payload, context=self._context)

    def validate(self, payload: Mapping[str, Any] | str | bytes) -> TunnelUpdateRequest:
        """Validate a payload and return the normalized request.

        Args:
            payload: Decoded request body, or its raw JSON text

        Returns:
            Accepted, normalized update request

        Raises:
            ValidationError: With every violation found in the payload
        """
        try:
            request = self._parse(payload)
        except pydantic.ValidationError as e:
            violations = [_to_violation(error) for error in e.errors()]
            if self.config.log_rejections:
                logger.info(
                    "Tunnel update request rejected",
                    violation_count=len(violations),
                    fields=[v.field for v in violations],
                )
            raise ValidationError(violations) from e

        logger.debug(
            "Tunnel update request accepted",
            tunnel_id=request.id,
            changed_sections=[ct.name for ct in request.changed_sections()],
        )
        return request

    def collect_violations(
        self, payload: Mapping[str, Any] | str | bytes
    ) -> list[Violation]:
        """Validate a payload and return its violations instead of raising.

        Returns:
            List of violations, empty when the payload is acceptable
        """
        try:
            self.validate(payload)
        except ValidationError as e:
            return e.violations
        return []


def validate_tunnel_update(
    payload: Mapping[str, Any] | str | bytes,
    config: ValidatorConfig | None = None,
) -> TunnelUpdateRequest:
    """Validate an update payload with an optional configuration.

    Args:
        payload: Decoded request body, or its raw JSON text
        config: Validator configuration (defaults apply when omitted)

    Returns:
        Accepted, normalized update request

    Raises:
        ValidationError: With every violation found in the payload
    """
    return TunnelUpdateValidator(config).validate(payload)
