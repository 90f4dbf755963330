"""
Example 02: Custom Where Clauses and Extra Fields

This example shows find_all_by_sql with bound parameters, the optional
FragmentSanitizer, and a Model field that is not a table column.
"""

from table_mapper import (
    ConnectionConfig,
    Engine,
    FragmentSanitizer,
    Mapper,
    Model,
    SQLSanitizationError,
)


class ProductMapper(Mapper["Product"]):
    """Mapper for the products table"""

    table_name = "products"

    def do_create_object(self, fields):
        return Product(self, fields)

    def cheaper_than(self, price):
        return self.find_all_by_sql("price < :price order by price", {"price": price})


class Product(Model):
    """A product with a display label computed in Python"""

    mapper_class = ProductMapper
    extra_fields = ("label",)


def main():
    config = ConnectionConfig(driver="sqlite", database=":memory:")

    with Engine.from_config(config) as engine:
        engine.execute(
            "CREATE TABLE products (id INTEGER PRIMARY KEY AUTOINCREMENT, name TEXT, price REAL)"
        )
        products = ProductMapper(engine, sanitizer=FragmentSanitizer())

        for name, price in [("pen", 1.5), ("book", 12.0), ("lamp", 30.0)]:
            products.new(name=name, price=price).save()

        print("=== Custom Where Clauses ===\n")
        for product in products.cheaper_than(20):
            # label is accepted by the Model but never written to the table
            product.set("label", f"{product['name']} (${product['price']:.2f})")
            print(f"  - {product['label']}")
        print()

        # Escaped literal in a hand-written fragment
        name = products.escape("book")
        book = products.find_one_by_sql(f"name = '{name}'")
        print(f"find_one_by_sql -> {book!r}\n")

        # The sanitizer rejects stacked statements
        try:
            products.find_all_by_sql("1 = 1; DROP TABLE products")
        except SQLSanitizationError as e:
            print(f"Rejected: {e}")


if __name__ == "__main__":
    main()
