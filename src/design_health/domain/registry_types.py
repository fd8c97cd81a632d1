from typing import TypedDict


class FindingRegistryEntry(TypedDict, total=False):
    display_name: str
    tooltip: str
    category: str
