"""HTTP client."""
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, IPvAnyAddress
import requests

from arithmetic_api.common.arithmetic import OPERATIONS
from arithmetic_api.common.operations import Number, OperationRequest, OperationResponse, Result


class ArithmeticClient(BaseModel):
    """
    HTTP client sending arithmetic requests to the server and returning the computed results.

    The HTTP client:
    - builds the JSON body from two operands
    - posts it to the route named after the operation
    - validates the JSON answer and returns the operation result
    """

    # Make the Pydantic instance immutable (read-only), to prevent errors
    # that could be caused by changes to the network configuration during execution.
    model_config = ConfigDict(frozen=True)

    host: IPvAnyAddress = Field(default="127.0.0.1", description="Server host address")
    port: int = Field(default=4000, ge=1, le=65535, description="Server TCP port")
    timeout: float = Field(default=5.0, gt=0, description="Request timeout in seconds")

    @property
    def base_url(self) -> str:
        """Root URL of the server."""
        return f"http://{self.host}:{self.port}"

    def compute(self, operation: str, first: Number, second: Number) -> Result:
        """
        Ask the server to apply an operation to two operands.

        :param str operation: Route name of the operation (sum, subtract, multiply, divide)
        :param Number first: Left-hand operand
        :param Number second: Right-hand operand

        :return: Operation result computed by the server
        :rtype: Result
        :raises ValueError: If the operation name is unknown
        :raises requests.HTTPError: If the server answers with an error status
        """
        if operation not in OPERATIONS:
            raise ValueError(f"Unsupported operation: {operation!r}")

        body: Dict[str, Number] = OperationRequest(firstOperand=first, secondOperand=second).model_dump()
        response = requests.post(f"{self.base_url}/{operation}", json=body, timeout=self.timeout)
        response.raise_for_status()

        return OperationResponse.model_validate(response.json()).operationResult

    def sum(self, first: Number, second: Number) -> Result:
        return self.compute("sum", first, second)

    def subtract(self, first: Number, second: Number) -> Result:
        return self.compute("subtract", first, second)

    def multiply(self, first: Number, second: Number) -> Result:
        return self.compute("multiply", first, second)

    def divide(self, first: Number, second: Number) -> Result:
        return self.compute("divide", first, second)
