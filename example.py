"""Example usage of the flat_tables library."""

from pathlib import Path

from flat_tables import Config

# Point the active file at a local data directory
config = Config(data_dir=Path("./example_data"))
config.set_file_location("people.json")
db = config.open()

# Start from an empty document and define a table
db.clear_all()
db.add_table("people", [("name", "string"), ("age", "int"), ("active", "bool")])

people = [
    ["Alice", "30", "true"],
    ["Bob", "25", "false"],
    ["Charlie", "35", "true"],
    ["Diana", "28", "true"],
    ["Eve", "22", "false"],
]

print("Adding people...")
for row in people:
    db.add_row("people", row)

db.sort_rows("people", "age")
print("\nPeople sorted by age:")
print(db.list_rows("people"))

print(f"\nActive rows: {db.find_rows('people', 'active', 'true')}")
print(f"Total age: {db.sum_field('people', 'age')}")
print(f"Mean age: {db.mean_field('people', 'age')}")

print(f"\nFile written to {config.file_location}:")
print(db.dumps())
