"""Category models.

A category is the unit that becomes a physical library. It is declared with
the modules it is composed from; the library target itself is only created
by the composition pass.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Category:
    """A named library composed from modules.

    Attributes:
        name: Unique category name (the shared library target name).
        modules: Member module names in composition order.
        public_headers: Public headers of all members, aggregated at composition.
        list_file: Declaration site.
        legacy: True for bootstrap libraries built eagerly by the legacy
            ``library_target`` path. These have no member modules.
    """

    name: str
    modules: list[str] = field(default_factory=list)
    public_headers: list[str] = field(default_factory=list)
    list_file: str | None = None
    legacy: bool = False
