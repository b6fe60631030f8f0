#!/usr/bin/env python3
"""
Basic usage example for ddb_table.

Walks through:
1. Setting up configuration and a table handle
2. Writing, reading, updating and deleting an item
3. Scanning the table and listing partition keys
4. Listing the tables in a region
5. Handling not-found and conversion errors

Needs a DynamoDB table named "users" with a string partition key "user_id",
e.g. on DynamoDB Local (docker run -p 8000:8000 amazon/dynamodb-local).
"""

import logging

from ddb_table import (
    ConversionError,
    DDBTable,
    DynamoDBConfig,
    ItemNotFoundError,
    list_tables,
)


def main():
    """Demonstrate basic usage of a table handle."""
    logging.basicConfig(level=logging.INFO)

    # 1. Configure DynamoDB connection
    print("1. Setting up configuration...")
    config = DynamoDBConfig.for_local_development()

    # Against AWS, use environment variables instead:
    # config = DynamoDBConfig.from_env()

    users = DDBTable("us-east-1", "users", "user_id", config=config)

    # 2. Single-item operations
    print("2. Writing and reading an item...")
    users.put_item({
        "user_id": "ada",
        "name": "Ada Lovelace",
        "born": 1815,
        "admin": True,
        "address": {"city": "London"},
        "interests": ["mathematics", "poetry"],
    })
    print(f"Read back: {users.get_item('ada')}")

    users.update_item("ada", {"status": "active", "born": 1815})
    print(f"After update: {users.get_item('ada')}")

    # 3. Scans
    print("3. Scanning...")
    print(f"All items: {users.scan_table()}")
    print(f"Partition keys: {users.read_partition_keys_list()}")

    items, next_key = users.scan_page(page_size=10)
    print(f"First page: {len(items)} item(s), more pages: {next_key is not None}")

    # 4. Tables in the region
    print("4. Listing tables...")
    print(f"Tables: {list_tables('us-east-1', config=config)}")

    # 5. Errors
    print("5. Error handling...")
    users.delete_item("ada")
    try:
        users.get_item("ada")
    except ItemNotFoundError as e:
        print(f"Deleted item is gone: {e}")

    try:
        users.put_item({"user_id": "blob", "payload": b"\x00\x01"})
    except ConversionError as e:
        print(f"Rejected unsupported value: {e}")


if __name__ == "__main__":
    main()
