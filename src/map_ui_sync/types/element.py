"""Element descriptors: how a named piece of the interface is located."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ElementDescriptor(BaseModel):
    """Locates one element (or a set of elements) in the interface.

    Attributes:
        name: Human-readable name used in logs and errors.
        selector: CSS or Playwright selector.
        has_text: Only match elements containing this text.
        nth: Pick the n-th match (0-based) instead of the whole set.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Human-readable name used in logs and errors")
    selector: str = Field(min_length=1, description="CSS or Playwright selector")
    has_text: str | None = Field(default=None, description="Only match elements containing this text")
    nth: int | None = Field(default=None, ge=0, description="Pick the n-th match (0-based)")

    def child(self, selector: str, *, name: str | None = None, has_text: str | None = None) -> ElementDescriptor:
        """Build a descriptor for a descendant of this element.

        Example:
            ``popup.child("button.MuiButton-disableElevation")`` on a popup with
            selector ``.MuiPopover-paper`` yields
            ``.MuiPopover-paper button.MuiButton-disableElevation``.
        """
        if self.has_text is not None or self.nth is not None:
            raise ValueError(f"Cannot derive a CSS child from filtered descriptor {self.name!r}")
        return ElementDescriptor(
            name=name or f"{self.name} > {selector}",
            selector=f"{self.selector} {selector}",
            has_text=has_text,
        )

    def at(self, index: int, *, name: str | None = None) -> ElementDescriptor:
        """Build a descriptor for the match at ``index`` (0-based)."""
        return self.model_copy(update={"nth": index, "name": name or f"{self.name}[{index}]"})

    def __str__(self) -> str:
        return self.name


__all__ = ["ElementDescriptor"]
