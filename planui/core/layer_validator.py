"""Layer validation module for validating catalog entries before they are stored"""

from typing import List, Optional, Tuple

from planui.models.project_layer import LayerType, LegendType, Provenance
from planui.schemas.project_layer_schema import ProjectLayerCreate
from planui.utils.custom_logger import CustomLogger

logger = CustomLogger("planui.core.layer_validator")


class LayerValidationError(Exception):
    """Custom exception for layer validation errors"""

    pass


class LayerValidator:
    """Validates a project layer's type and legend metadata"""

    VALID_LAYER_TYPES = [t.value for t in LayerType]

    VALID_LEGEND_TYPES = [t.value for t in LegendType]

    VALID_PROVENANCES = [t.value for t in Provenance]

    @staticmethod
    def validate_layer_config(payload: ProjectLayerCreate) -> Tuple[bool, Optional[str]]:
        """
        Validate a layer payload

        Returns:
            Tuple of (is_valid, error_message)
        """
        try:
            LayerValidator._validate_basic_fields(payload)

            if payload.legend == LegendType.MANUAL.value:
                LayerValidator._validate_manual_legend(
                    payload.values, payload.color, payload.labels
                )
            elif payload.legend == LegendType.CONTINUOUS.value:
                LayerValidator._validate_continuous_legend(payload.unit, payload.labels)

            return True, None

        except LayerValidationError as e:
            logger.warning(f"Layer validation failed: {str(e)}")
            return False, str(e)

    @staticmethod
    def _validate_basic_fields(payload: ProjectLayerCreate) -> None:
        """Validate required fields and enum values"""
        if not payload.name or not payload.name.strip():
            raise LayerValidationError("Layer name is required")

        if not payload.type:
            raise LayerValidationError("Layer type is required")

        if payload.type not in LayerValidator.VALID_LAYER_TYPES:
            raise LayerValidationError(
                f"Invalid layer type '{payload.type}'. Must be one of: {', '.join(LayerValidator.VALID_LAYER_TYPES)}"
            )

        if payload.legend is not None and payload.legend not in LayerValidator.VALID_LEGEND_TYPES:
            raise LayerValidationError(
                f"Invalid legend '{payload.legend}'. Must be one of: {', '.join(LayerValidator.VALID_LEGEND_TYPES)}"
            )

        if (
            payload.provenance is not None
            and payload.provenance not in LayerValidator.VALID_PROVENANCES
        ):
            raise LayerValidationError(
                f"Invalid provenance '{payload.provenance}'. Must be one of: {', '.join(LayerValidator.VALID_PROVENANCES)}"
            )

    @staticmethod
    def _validate_manual_legend(
        values: Optional[List[str]], color: Optional[List[str]], labels: Optional[List[str]]
    ) -> None:
        """A manual legend lists its classes: values, colors and labels line up one to one"""
        if not values:
            raise LayerValidationError("Manual legend requires values")
        if not color:
            raise LayerValidationError("Manual legend requires color")
        if not labels:
            raise LayerValidationError("Manual legend requires labels")

        if not len(values) == len(color) == len(labels):
            raise LayerValidationError(
                f"Manual legend arrays must have the same length "
                f"(values={len(values)}, color={len(color)}, labels={len(labels)})"
            )

    @staticmethod
    def _validate_continuous_legend(unit: Optional[str], labels: Optional[List[str]]) -> None:
        """A continuous legend is a colour ramp over a unit and carries no class labels"""
        if not unit or not unit.strip():
            raise LayerValidationError("Continuous legend requires a unit")

        if labels:
            raise LayerValidationError("Continuous legend must not have labels")
