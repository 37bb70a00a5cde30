"""HTTP server exposing the binary arithmetic operations as JSON endpoints."""
from typing import Callable, Tuple

from flask import Flask, Response, jsonify, request
from flask_cors import CORS
from pydantic import BaseModel, Field, IPvAnyAddress

from arithmetic_api.common.arithmetic import OPERATIONS, compute
from arithmetic_api.common.logger import logger
from arithmetic_api.common.operations import OperationRequest, OperationResponse, Result


class ArithmeticServer(BaseModel):
    """
    HTTP server answering arithmetic requests.

    Features:
        - One POST route per operation: /sum, /subtract, /multiply, /divide.
        - JSON bodies in and out, cross-origin requests allowed from any origin.
        - Stateless: every request is computed on its own and answered at once.
        - Single-threaded serving loop, one request handled at a time.
    """

    host: IPvAnyAddress = Field(default="127.0.0.1", description="Server host address")
    port: int = Field(default=4000, ge=1, le=65535, description="Server TCP port")

    def _handle(self, operation: str) -> Tuple[Response, int]:
        """
        Parse the request body, apply the operation and build the JSON answer.

        Every well-formed request is answered with a success status: operands
        are never validated, odd values come back as NaN or concatenated text.
        Malformed JSON is rejected by Flask itself before reaching this point,
        and bodies sent without a JSON content type carry no operands.

        :param str operation: Route name of the operation

        :return: Tuple of (JSON response, HTTP status)
        :rtype: Tuple[Response, int]
        """
        body = request.get_json() if request.is_json else {}
        first, second = OperationRequest.from_body(body).operands()

        result: Result = compute(operation, first, second)
        logger.debug(f"{operation}({first!r}, {second!r}) = {result!r}")

        return jsonify(OperationResponse(operationResult=result).model_dump()), 200

    def _make_view(self, operation: str) -> Callable[[], Tuple[Response, int]]:
        """
        Bind the shared handler to one operation name.

        :param str operation: Route name of the operation

        :return: Flask view function
        :rtype: Callable[[], Tuple[Response, int]]
        """
        def view() -> Tuple[Response, int]:
            return self._handle(operation)

        return view

    def create_app(self) -> Flask:
        """
        Build the Flask application with CORS and one route per operation.

        :return: Configured Flask application
        :rtype: Flask
        """
        app = Flask(__name__)
        CORS(app)

        for operation in OPERATIONS:
            app.add_url_rule(
                f"/{operation}",
                endpoint=operation,
                view_func=self._make_view(operation),
                methods=["POST"],
            )

        return app

    def start(self) -> None:
        """
        Start listening for arithmetic requests.

        Blocks until the process is interrupted.

        :return: None
        """
        app: Flask = self.create_app()
        logger.info(f"🖥️ Server started on {self.host}:{self.port}")
        app.run(host=str(self.host), port=self.port, threaded=False)
