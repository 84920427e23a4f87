"""Attribute bindings — which elements show which model attribute.

A binding spec maps a model attribute name to one selector or to a list
of selectors. Specs are resolved into ``AttributeBinding`` objects once,
when a model is bound, so nothing downstream needs to check types::

    resolve_bindings({"address": "[name=address]", "city": ["#city", "#title"]})
"""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from wren.errors import BindingError, ConfigurationError

type Converter = Callable[[Any], Any]


@dataclass(frozen=True, slots=True)
class SingleBinding:
    selector: str


@dataclass(frozen=True, slots=True)
class BindingList:
    selectors: tuple[str, ...]


type BindingSpec = SingleBinding | BindingList


@dataclass(slots=True)
class ElementBinding:
    """One element bound to an attribute, with an optional converter."""

    selector: str
    converter: Converter | None = None


@dataclass(slots=True)
class AttributeBinding:
    """All element selectors bound to a single model attribute."""

    name: str
    elements: list[ElementBinding] = field(default_factory=list)

    @property
    def selectors(self) -> list[str]:
        return [element.selector for element in self.elements]

    def add_selector(self, selector: str) -> None:
        if not selector:
            msg = f"Cannot bind an empty selector to {self.name!r}"
            raise BindingError(msg)
        self.elements.append(ElementBinding(selector))

    def remove_selector(self, selector: str) -> None:
        self.elements.remove(self._find(selector))

    def add_converter(self, selector: str, converter: Converter) -> None:
        """Attach *converter* to the element bound through *selector*."""
        self._find(selector).converter = converter

    def remove_converter(self, selector: str, converter: Converter) -> None:
        element = self._find(selector)
        if element.converter is not converter:
            msg = f"Converter {converter!r} is not attached to {selector!r}"
            raise BindingError(msg)
        element.converter = None

    def _find(self, selector: str) -> ElementBinding:
        for element in self.elements:
            if element.selector == selector:
                return element
        msg = f"Selector {selector!r} is not bound to {self.name!r}"
        raise BindingError(msg)

    def __str__(self) -> str:
        return "[" + ",".join(str({"selector": s}) for s in self.selectors) + "]"


def binding_spec(value: str | Sequence[str] | BindingSpec) -> BindingSpec:
    """Resolve a raw configuration value into a binding spec."""
    match value:
        case SingleBinding() | BindingList():
            return value
        case str():
            return SingleBinding(value)
        case [*selectors] if all(isinstance(s, str) for s in selectors):
            return BindingList(tuple(selectors))
        case _:
            msg = f"Binding must be a selector or a list of selectors, got {value!r}"
            raise ConfigurationError(msg)


def resolve_bindings(
    bindings: Mapping[str, str | Sequence[str] | BindingSpec],
) -> dict[str, AttributeBinding]:
    """Turn a binding configuration into ``AttributeBinding`` objects."""
    resolved: dict[str, AttributeBinding] = {}
    for name, value in bindings.items():
        binding = AttributeBinding(name)
        match binding_spec(value):
            case SingleBinding(selector=selector):
                binding.add_selector(selector)
            case BindingList(selectors=selectors):
                for selector in selectors:
                    binding.add_selector(selector)
        resolved[name] = binding
    return resolved
