"""Example 01: Basic Usage - Rljson Fundamentals.

This example demonstrates the fundamental operations:
- Building a database from plain JSON-shaped tables
- Merging more data and watching the content hashes change
- Following links between tables with value() and select()
- Checking links and hashes
"""

from rljson import Rljson


def main():
    """Run the basic usage example."""
    print("=" * 80)
    print("RLJSON BASIC USAGE EXAMPLE")
    print("=" * 80)

    # Step 1: Create a database
    # Every row, table and the database itself receive a content hash.
    db = Rljson.from_json(
        {
            "cities": {
                "_data": [
                    {"name": "Berlin", "country": "DE"},
                    {"name": "Paris", "country": "FR"},
                ]
            }
        }
    )
    print(f"\n1. Created database with hash {db.data_hash}")
    for path in db.ls():
        print(f"   - {path}")

    # Step 2: Merge more rows
    # add_data returns a new snapshot. Duplicate rows collapse onto one hash.
    berlin = db.hash("cities", 0)
    db2 = db.add_data(
        {
            "cities": {
                "_data": [
                    {"name": "Berlin", "country": "DE"},
                    {"name": "Rome", "country": "IT"},
                ]
            },
            "people": {"_data": [{"name": "Ada", "citiesRef": berlin}]},
        }
    )
    print("\n2. Merged new data:")
    print(f"   old hash {db.data_hash}, {len(db.table('cities'))} cities")
    print(f"   new hash {db2.data_hash}, {len(db2.table('cities'))} cities")

    # Step 3: Follow links
    ada = db2.hash("people", 0)
    print("\n3. Following a link:")
    print(f"   Ada lives in {db2.value(table='people', row_hash=ada, path='citiesRef/name')}")
    for row in db2.select("people", ["name", "citiesRef/country"]):
        print(f"   - {row}")

    # Step 4: Integrity checks
    db2.check_links()
    db2.validate_hashes()
    print("\n4. Links and hashes are valid")

    print("\n" + "=" * 80)
    print("EXAMPLE COMPLETE")
    print("=" * 80)


if __name__ == "__main__":
    main()
