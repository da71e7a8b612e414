from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ConflictError(HTTPException):
    def __init__(self, detail: str = "Conflict"):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class BadRequestError(HTTPException):
    def __init__(self, detail: str = "Bad request"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class UnauthorizedError(HTTPException):
    def __init__(self, detail: str = "Authentication required"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class BrandNotFoundError(NotFoundError):
    def __init__(self, detail: str = "Brand not found"):
        super().__init__(detail=detail)


class BrandAlreadyExistsError(ConflictError):
    def __init__(self, detail: str = "Brand already exists"):
        super().__init__(detail=detail)


class BrandNameConflictError(ConflictError):
    def __init__(self, detail: str = "Brand name already exists"):
        super().__init__(detail=detail)


class BrandInUseError(BadRequestError):
    def __init__(self, product_count: int):
        self.product_count = product_count
        super().__init__(
            detail=f"Cannot delete brand. It is being used by {product_count} product(s)"
        )
