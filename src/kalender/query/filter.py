# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod
from typing import Any


class Predicate(ABC):
    @abstractmethod
    def include(self, item: dict[str, Any]) -> bool: ...

    def filter(self, items: list[dict[str, Any]]) -> list[dict[str, Any]]:
        return [item for item in items if self.include(item)]


class And(Predicate):
    def __init__(self) -> None:
        self.predicates: list[Predicate] = []

    def add_predicate(self, predicate: Predicate) -> None:
        self.predicates.append(predicate)

    def include(self, item: dict[str, Any]) -> bool:
        return all(predicate.include(item) for predicate in self.predicates)


class Or(Predicate):
    def __init__(self) -> None:
        self.predicates: list[Predicate] = []

    def add_predicate(self, predicate: Predicate) -> None:
        self.predicates.append(predicate)

    def include(self, item: dict[str, Any]) -> bool:
        return any(predicate.include(item) for predicate in self.predicates)


class Equals(Predicate):
    def __init__(self, property: str, value: str) -> None:
        self.property = property
        self.value = value

    def include(self, item: dict[str, Any]) -> bool:
        if item.get(self.property) is None:
            return False
        return str(item[self.property]) == self.value


class ContainsNoCase(Predicate):
    def __init__(self, property: str, value: str) -> None:
        self.property = property
        self.value = value

    def include(self, item: dict[str, Any]) -> bool:
        if item.get(self.property) is None:
            return False
        return self.value.lower() in str(item[self.property]).lower()
