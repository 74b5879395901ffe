"""Basic usage example for shortlease."""

from shortlease import LeaseTable


def main() -> None:
    """Demonstrate handle assignment and reuse."""
    table = LeaseTable[dict].with_capacity(4)

    print("=== Handle Assignment Example ===\n")

    print("Checking in requests...")
    first = table.insert({"method": "ping"})
    second = table.insert({"method": "status"})
    third = table.insert({"method": "shutdown"})
    print(f"  Handles: {first}, {second}, {third}")
    print(f"  Table: {table}\n")

    print(f"Completing request {second}: {table.remove(second)}")
    print(f"  {second} in table: {second in table}\n")

    fourth = table.insert({"method": "reload"})
    print(f"Next request reuses the lowest free handle: {fourth}")

    for request, handle in table.items():
        print(f"  {handle}: {request}")

    print(f"\nHeld: {len(table)}, slots: {table.capacity}")


if __name__ == "__main__":
    main()
