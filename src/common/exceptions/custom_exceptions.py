"""Custom application-wide exceptions."""


class ApplicationError(Exception):
    """Base class for application-specific errors."""

    def __init__(
        self, message: str = "An application error occurred", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_exception = original_exception
        self.message = message

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original error: {self.original_exception})"
        return self.message


class InventoryError(ApplicationError):
    """Base class for rejected catalog and sale operations.

    These are recoverable: the caller reports them and asks again.
    """


class ProductNotFound(InventoryError):
    """Raised when a product ID does not resolve in the catalog."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product not found: {product_id}")
        self.product_id = product_id


class InvalidQuantity(InventoryError):
    """Raised for non-positive sale quantities or negative stock levels."""

    def __init__(self, quantity: int, message: str | None = None) -> None:
        super().__init__(message or f"Invalid quantity: {quantity}. Quantity must be greater than zero.")
        self.quantity = quantity


class InsufficientStock(InventoryError):
    """Raised when a sale asks for more units than are in stock."""

    def __init__(self, product_id: int, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient stock for product {product_id}: requested {requested}, available {available}"
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class UnassignedSupplier(InventoryError):
    """Raised when a supplier sells a product outside its assignment list."""

    def __init__(self, supplier_name: str, product_id: int) -> None:
        super().__init__(f"Product {product_id} is not assigned to supplier '{supplier_name}'")
        self.supplier_name = supplier_name
        self.product_id = product_id
