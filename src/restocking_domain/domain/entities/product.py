"""Product entity."""

from src.common.exceptions.custom_exceptions import InsufficientStock, InvalidQuantity


def _is_whole_number(value) -> bool:
    # bool is an int subclass, but True is not a quantity
    return isinstance(value, int) and not isinstance(value, bool)


class Product:
    """A catalog item.

    Identity and descriptive fields are read-only. The stock level can only be
    changed through sell() and set_stock_level(), and never drops below zero.
    """

    def __init__(
        self,
        product_id: int,
        name: str,
        category: str,
        price: float,
        stock_level: int,
        reorder_threshold: int,
    ) -> None:
        if not _is_whole_number(stock_level):
            raise ValueError("Stock level must be a whole number.")
        if stock_level < 0:
            raise ValueError("Stock level cannot be negative.")
        if not _is_whole_number(reorder_threshold):
            raise ValueError("Reorder threshold must be a whole number.")
        if reorder_threshold < 0:
            raise ValueError("Reorder threshold cannot be negative.")

        self._product_id = product_id
        self._name = name
        self._category = category
        self._price = price
        self._stock_level = stock_level
        self._reorder_threshold = reorder_threshold

    @property
    def product_id(self) -> int:
        return self._product_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def category(self) -> str:
        return self._category

    @property
    def price(self) -> float:
        return self._price

    @property
    def stock_level(self) -> int:
        return self._stock_level

    @property
    def reorder_threshold(self) -> int:
        return self._reorder_threshold

    def sell(self, quantity: int) -> int:
        """Removes sold units from stock and returns the new stock level.

        Rejected sales leave the stock untouched.
        """
        if not _is_whole_number(quantity):
            raise InvalidQuantity(quantity, f"Invalid quantity: {quantity!r}. Quantity must be a whole number.")
        if quantity <= 0:
            raise InvalidQuantity(quantity)
        if quantity > self._stock_level:
            raise InsufficientStock(self._product_id, quantity, self._stock_level)
        self._stock_level -= quantity
        return self._stock_level

    def set_stock_level(self, new_stock_level: int) -> None:
        if not _is_whole_number(new_stock_level):
            raise InvalidQuantity(
                new_stock_level, f"Invalid stock level: {new_stock_level!r}. Stock level must be a whole number."
            )
        if new_stock_level < 0:
            raise InvalidQuantity(new_stock_level, "Stock level cannot be negative.")
        self._stock_level = new_stock_level

    def __repr__(self) -> str:
        return (
            f"Product(product_id={self._product_id!r}, name={self._name!r}, category={self._category!r}, "
            f"price={self._price!r}, stock_level={self._stock_level!r}, reorder_threshold={self._reorder_threshold!r})"
        )
