"""Core data structures shared by the aggregation pipeline.

Vendors are described entirely by data: a VendorSpec carries the URLs to
fetch and a SelectorSet telling the extractor where the product fields live.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple, Union

import soupsieve as sv
from soupsieve import SelectorSyntaxError

from deal_hunter.core.exceptions import SelectorConfigError, VendorConfigError

SelectorExpr = Union[str, Sequence[str]]


def _as_alternatives(value: SelectorExpr) -> Tuple[str, ...]:
    """Coerce a selector field into a tuple of alternative expressions."""
    if isinstance(value, str):
        return (value,)
    return tuple(value)


def compile_selector(expression: str):
    """Compile one CSS selector expression.

    Raises:
        SelectorConfigError: If the expression is empty or not valid CSS
    """
    if not expression or not expression.strip():
        raise SelectorConfigError(expression, "empty expression")
    try:
        return sv.compile(expression)
    except SelectorSyntaxError as e:
        raise SelectorConfigError(expression, str(e)) from e


@dataclass(frozen=True)
class SelectorSet:
    """The five structural match expressions for one vendor.

    Each field is a prioritized tuple of CSS expressions. When reading a
    card, the first expression that matches anything wins. Expressions are
    compiled on construction so that a bad selector fails at start-up
    instead of on every request.
    """

    card: SelectorExpr
    title: SelectorExpr
    price: SelectorExpr
    image: SelectorExpr
    link: SelectorExpr
    _compiled: dict = field(init=False, repr=False, compare=False, hash=False)

    FIELDS = ("card", "title", "price", "image", "link")

    def __post_init__(self):
        compiled = {}
        for name in self.FIELDS:
            alternatives = _as_alternatives(getattr(self, name))
            if not alternatives:
                raise SelectorConfigError("", f"no expressions given for '{name}'")
            object.__setattr__(self, name, alternatives)
            compiled[name] = tuple(compile_selector(expr) for expr in alternatives)
        object.__setattr__(self, "_compiled", compiled)

    def patterns(self, name: str) -> tuple:
        """Return the compiled patterns for a field, in priority order."""
        return self._compiled[name]


@dataclass(frozen=True)
class VendorSpec:
    """Immutable definition of one storefront."""

    name: str
    request_path: str  # Path (plus query) of the clearance listing
    backend: str  # Routing identifier resolved to a host by the fetcher
    base_url: str  # scheme://host, used to absolutize links and images
    selectors: SelectorSet
    search_path: Optional[str] = None  # Template containing "{query}"

    def __post_init__(self):
        """Validate data after initialization."""
        if not self.name:
            raise VendorConfigError("vendor name is required")
        if not self.base_url.startswith(("http://", "https://")):
            raise VendorConfigError(
                f"base_url for {self.name} must be an absolute http(s) origin: {self.base_url!r}"
            )
        if self.search_path is not None and "{query}" not in self.search_path:
            raise VendorConfigError(f"search_path for {self.name} must contain '{{query}}'")


@dataclass(frozen=True)
class DealItem:
    """One normalized, validated product entry."""

    vendor: str
    title: str
    price_str: str
    price_val: float
    link: str
    image: str
