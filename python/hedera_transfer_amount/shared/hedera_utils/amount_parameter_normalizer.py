from typing import Any, Type

from pydantic import BaseModel, ValidationError


class AmountParameterNormaliser:
    """Validates raw inputs (dicts coming from the form layer) against the
    pydantic schemas in ``parameter_schemas``."""

    @staticmethod
    def parse_params_with_schema(
            params: Any,
            schema: Type[BaseModel],
    ) -> BaseModel:
        """Validate and parse parameters using a Pydantic schema.

        Args:
            params: The raw input parameters to validate.
            schema: The Pydantic model to validate against.

        Returns:
            BaseModel: An instance of the validated Pydantic model.

        Raises:
            ValueError: If validation fails, with a formatted description of the issues.
        """
        if isinstance(params, schema):
            return params
        try:
            return schema.model_validate(params)
        except ValidationError as e:
            issues: str = AmountParameterNormaliser.format_validation_errors(e)
            raise ValueError(f"Invalid parameters: {issues}") from e

    @staticmethod
    def format_validation_errors(error: ValidationError) -> str:
        """Format Pydantic validation errors into a single human-readable string."""
        return "; ".join(
            f'Field "{err["loc"][0] if err["loc"] else "<root>"}" - {err["msg"]}'
            for err in error.errors()
        )
