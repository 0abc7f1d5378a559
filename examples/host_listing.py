"""Basic sortkit usage example.

Demonstrates:
- Sorting mixed records by several keys with per-key direction
- Natural ordering of names with embedded numbers
- Free-text search across fields, with and without exact matching
"""

from dataclasses import dataclass

from sortkit import EngineSettings, search, sort_by, sortable_numeric_suffix


@dataclass(slots=True)
class Host:
    name: str
    zone: str | None
    cpu: int | None = None


HOSTS = [
    {"name": "node10", "state": "active", "meta": {"zone": "b", "cpu": 8}},
    {"name": "node2", "state": "error", "meta": {"zone": "a", "cpu": 4}},
    {"name": "node1", "state": "active", "meta": {"zone": "a"}},
    {"name": "gateway", "state": None, "meta": {"zone": "b", "cpu": 2}},
]


def main() -> None:
    settings = EngineSettings(string_collation="casefold")

    print("By zone, then name descending:")
    for host in sort_by(HOSTS, ["meta.zone", "name:desc"], settings=settings):
        print(f"  {host['meta']['zone']}  {host['name']}")

    print("By cpu, reversed (missing last):")
    for host in sort_by(HOSTS, "meta.cpu", desc=True):
        print(f"  {host['meta'].get('cpu', '-')}  {host['name']}")

    print("Natural name order:")
    names = [h["name"] for h in HOSTS]
    print("  " + ", ".join(sorted(names, key=sortable_numeric_suffix)))

    print("Dataclass records:")
    hosts = [Host("web2", "a", 2), Host("web10", "b"), Host("web1", None, 1)]
    for host in sort_by(hosts, ["zone", "cpu:desc"]):
        print(f"  {host}")

    print("Search 'node active' in name/state:")
    for host in search(HOSTS, "node active", ["name", "state"]):
        print(f"  {host['name']}")

    print("Search 'a' as an exact zone:")
    for host in search(HOSTS, "a", "meta.zone:exact"):
        print(f"  {host['name']}")


if __name__ == "__main__":
    main()
