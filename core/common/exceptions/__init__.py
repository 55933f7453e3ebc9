from http import HTTPStatus
from typing import Optional, TypedDict, Union

from rest_framework.exceptions import ValidationError
from rest_framework.status import HTTP_400_BAD_REQUEST


class ErrorMessage(TypedDict):
    """Error payload returned to the operator screen"""

    error: str


class ClientException(ValidationError):
    """Base class for errors caused by the request data (HTTP 400)"""

    status_code: Optional[HTTPStatus] = HTTP_400_BAD_REQUEST

    def __init__(self, message: Union[ErrorMessage, str]):
        self.message: Union[ErrorMessage, str] = message
        super().__init__(detail=self.message, code=self.status_code)
