"""
Example 01: Basic Mapper Usage

This example defines a Mapper and Model for a users table and walks through
find, insert, update and delete.
"""

import tempfile
from pathlib import Path

from table_mapper import ConnectionConfig, Engine, Mapper, Model


class UserMapper(Mapper["User"]):
    """Mapper for the users table"""

    table_name = "users"

    def do_create_object(self, fields):
        return User(self, fields)


class User(Model):
    """One row of the users table"""

    mapper_class = UserMapper


def main():
    # Create a temporary database
    db_file = tempfile.NamedTemporaryFile(delete=False, suffix=".db")
    db_path = db_file.name
    db_file.close()

    config = ConnectionConfig(driver="sqlite", database=db_path)

    with Engine.from_config(config) as engine:
        engine.execute("""
            CREATE TABLE users (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                email TEXT NOT NULL
            )
        """)

        users = UserMapper(engine)
        print("=== Basic Mapper Usage ===\n")
        print(f"Discovered fields: {users.table_fields()}\n")

        # Insert: a Model without id is inserted on save()
        alice = users.new(name="Alice", email="alice@example.com").save()
        users.new(name="Bob", email="bob@example.com").save()
        print(f"Inserted Alice with id {alice.id}\n")

        # find: one row by id
        found = users.find(alice.id)
        print(found)

        # save_fields: update in place and save
        found.save_fields({"email": "alice@example.org"})
        print(f"Updated email: {users.find(alice.id)['email']}\n")

        # find_by: every row with a matching value
        for user in users.find_by("name", "Bob") or []:
            print(f"find_by name=Bob -> {user!r}")

        # delete: accepts a Model or an id
        users.delete(alice)
        print(f"After delete, find({alice.id}) -> {users.find(alice.id)}")

    # Clean up
    Path(db_path).unlink()


if __name__ == "__main__":
    main()
