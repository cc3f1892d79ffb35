from fastapi import HTTPException, status


class QueryFailedException(HTTPException):
    def __init__(self, message: str):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=message,
        )


class CombinedDataException(QueryFailedException):
    def __init__(self):
        super().__init__("Failed to fetch combined data")
