from fastapi import HTTPException, status


class DetailedHTTPException(HTTPException):
    """
    Base exception for all custom HTTP exceptions with extended detail support.
    """

    def __init__(self, status_code: int, detail: str, **kwargs):
        super().__init__(status_code=status_code, detail=detail, **kwargs)


class BadRequestException(DetailedHTTPException):
    """
    Raised when the request format or data is invalid.
    """

    def __init__(self, detail: str = "Bad request"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class UnsupportedMediaTypeException(DetailedHTTPException):
    """
    Raised when an uploaded file is not an accepted image type.
    """

    def __init__(self, detail: str = "Only image files are accepted"):
        super().__init__(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, detail=detail
        )


class PayloadTooLargeException(DetailedHTTPException):
    """
    Raised when an uploaded file exceeds the configured size limit.
    """

    def __init__(self, detail: str = "Image file is too large"):
        super().__init__(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=detail
        )


class ServerErrorException(DetailedHTTPException):
    """
    Generic internal server error wrapper.
    """

    def __init__(self, detail: str = "An internal server error occurred"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail
        )
