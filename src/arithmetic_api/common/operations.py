"""Pydantic models for arithmetic operation requests and responses."""
from typing import Any, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from arithmetic_api.common.coercion import MISSING

Number = Union[int, float]
# sum concatenates when an operand is textual
Result = Union[int, float, str]


class OperationRequest(BaseModel):
    """
    Represents the body of a request sent to one of the operation routes.

    Operands are kept exactly as received: any JSON value is accepted and
    an absent field stays distinguishable from an explicit null.
    """

    model_config = ConfigDict(frozen=True)

    firstOperand: Any = Field(default=None, description="Left-hand operand")
    secondOperand: Any = Field(default=None, description="Right-hand operand")

    @classmethod
    def from_body(cls, body: Any) -> "OperationRequest":
        """
        Build a request from a decoded JSON body of any shape.

        Bodies that are not JSON objects carry no operands.

        :param Any body: Decoded JSON body

        :return: Parsed request
        :rtype: OperationRequest
        """
        if not isinstance(body, dict):
            return cls()
        fields = {name: body[name] for name in ("firstOperand", "secondOperand") if name in body}
        return cls(**fields)

    def operands(self) -> Tuple[Any, Any]:
        """Both operands, with MISSING in place of absent fields."""
        return tuple(
            getattr(self, name) if name in self.model_fields_set else MISSING
            for name in ("firstOperand", "secondOperand")
        )


class OperationResponse(BaseModel):
    """Represents the body returned by one of the operation routes."""

    operationResult: Result = Field(..., description="Result of applying the operation to both operands")
