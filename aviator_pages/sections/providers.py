"""Searchable, filterable, sortable providers grid with "show more" paging.

The grid is the one section with internal state. State lives in an immutable
:class:`GridState`; each user event maps to a pure transition function, and
the owning :class:`ProvidersGrid` swaps in the new state and calls its single
re-render entry point, :meth:`ProvidersGrid.render_list`, which rebuilds the
tile list from scratch.

Examples
--------
>>> providers = normalize_providers(
...     [
...         {"name": "Evolution", "categories": ["Live"], "popularity": 98},
...         {"name": "NetEnt", "categories": ["Slots"], "popularity": 88},
...     ]
... )
>>> state = search_changed(GridState(), "net", initial_visible=12)
>>> [p.name for p in compute_view(providers, state).visible]
['NetEnt']
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import enum

from aviator_pages.config.helpers import _finite_number
from aviator_pages.dom import Element, Event, h

from .base import SectionData, SectionKind, items, text

ALL_CATEGORY = "All"
PAGE_SIZE = 12
DEFAULT_POPULARITY = 50
NO_RESULTS_TEXT = "No providers match your search."


class SortMode(enum.StrEnum):
    """Ordering applied to the filtered providers."""

    POPULAR = "popular"
    AZ = "az"
    ZA = "za"


SORT_LABELS: dict[SortMode, str] = {
    SortMode.POPULAR: "Sort: Popular",
    SortMode.AZ: "Sort: A–Z",
    SortMode.ZA: "Sort: Z–A",
}


@dc.dataclass(frozen=True, slots=True)
class Provider:
    """A normalised provider entry; ``categories`` is never empty."""

    name: str
    categories: tuple[str, ...] = (ALL_CATEGORY,)
    popularity: float = DEFAULT_POPULARITY

    @property
    def badges(self) -> tuple[str, ...]:
        """Categories shown on the tile: everything but ``All``, else ``All``."""
        named = tuple(cat for cat in self.categories if cat != ALL_CATEGORY)
        return named or (ALL_CATEGORY,)


def normalize_provider(entry: object) -> Provider | None:
    """Normalise a legacy name string or a provider mapping.

    Returns ``None`` for entries that are neither.
    """
    match entry:
        case str():
            return Provider(name=entry)
        case cabc.Mapping():
            raw_categories = entry.get("categories")
            categories: tuple[str, ...] = ()
            if isinstance(raw_categories, cabc.Sequence) and not isinstance(
                raw_categories, str
            ):
                categories = tuple(str(cat) for cat in raw_categories)
            popularity = _finite_number(entry.get("popularity"))
            return Provider(
                name=text(entry, "name", "Provider"),
                categories=categories or (ALL_CATEGORY,),
                popularity=DEFAULT_POPULARITY if popularity is None else popularity,
            )
        case _:
            return None


def normalize_providers(entries: cabc.Iterable[object]) -> tuple[Provider, ...]:
    """Normalise every usable entry, preserving order."""
    normalized = (normalize_provider(entry) for entry in entries)
    return tuple(provider for provider in normalized if provider is not None)


def initial_visible_count(data: SectionData) -> int:
    """Return the configured ``initialVisible`` or :data:`PAGE_SIZE`."""
    configured = _finite_number(data.get("initialVisible"))
    if configured is None:
        return PAGE_SIZE
    return max(0, int(configured))


@dc.dataclass(frozen=True, slots=True)
class GridState:
    """Search, filter, sort, and paging state of one grid instance."""

    query: str = ""
    active_category: str = ALL_CATEGORY
    sort_mode: SortMode = SortMode.POPULAR
    visible_count: int = PAGE_SIZE


def normalize_query(raw: str | None) -> str:
    return (raw or "").strip().lower()


def search_changed(
    state: GridState, raw: str | None, *, initial_visible: int
) -> GridState:
    """Apply a new search text; paging restarts from the initial count."""
    return dc.replace(state, query=normalize_query(raw), visible_count=initial_visible)


def category_selected(
    state: GridState, category: str, *, initial_visible: int
) -> GridState:
    """Select a single category filter; paging restarts from the initial count."""
    return dc.replace(state, active_category=category, visible_count=initial_visible)


def sort_changed(state: GridState, mode: str) -> GridState:
    """Change the ordering; the paging position is kept.

    Unrecognised modes leave the state unchanged.
    """
    try:
        sort_mode = SortMode(mode)
    except ValueError:
        return state
    return dc.replace(state, sort_mode=sort_mode)


def show_more_clicked(state: GridState) -> GridState:
    """Reveal another page of tiles."""
    return dc.replace(state, visible_count=state.visible_count + PAGE_SIZE)


def matches(provider: Provider, state: GridState) -> bool:
    """Return whether ``provider`` passes the category filter and name search."""
    in_category = (
        state.active_category == ALL_CATEGORY
        or state.active_category in provider.categories
    )
    in_query = not state.query or state.query in provider.name.lower()
    return in_category and in_query


def _name_key(provider: Provider) -> tuple[str, str]:
    return (provider.name.casefold(), provider.name)


def sort_providers(
    providers: cabc.Iterable[Provider], mode: SortMode
) -> list[Provider]:
    """Return ``providers`` ordered by ``mode``."""
    match mode:
        case SortMode.AZ:
            return sorted(providers, key=_name_key)
        case SortMode.ZA:
            return sorted(providers, key=_name_key, reverse=True)
        case _:
            return sorted(providers, key=lambda p: p.popularity, reverse=True)


@dc.dataclass(frozen=True, slots=True)
class GridView:
    """Result of filtering, sorting, and paging the providers."""

    filtered: tuple[Provider, ...]
    visible: tuple[Provider, ...]

    @property
    def is_empty(self) -> bool:
        return not self.filtered

    @property
    def show_more(self) -> bool:
        return len(self.filtered) > len(self.visible)


def compute_view(providers: cabc.Iterable[Provider], state: GridState) -> GridView:
    """Filter, then sort, then take the first ``visible_count`` providers."""
    filtered = sort_providers(
        (provider for provider in providers if matches(provider, state)),
        state.sort_mode,
    )
    return GridView(
        filtered=tuple(filtered), visible=tuple(filtered[: state.visible_count])
    )


def render_tile(provider: Provider) -> Element:
    return h(
        "div",
        {"class": "provider-tile"},
        [
            h(
                "div",
                {"class": "provider-title"},
                [h("span", {}, provider.name), h("span", {"class": "badge"}, "API-ready")],
            ),
            h(
                "div",
                {"class": "provider-badges"},
                [h("span", {"class": "badge"}, cat) for cat in provider.badges],
            ),
        ],
    )


class ProvidersGrid:
    """One live providers grid: its element tree plus the state it owns."""

    def __init__(self, data: SectionData) -> None:
        self.providers = normalize_providers(items(data, "providers"))
        self.categories = [str(cat) for cat in items(data, "categories")] or [
            ALL_CATEGORY
        ]
        self.initial_visible = initial_visible_count(data)
        self.state = GridState(visible_count=self.initial_visible)
        self.view = GridView(filtered=(), visible=())

        self.search = h(
            "input",
            {
                "type": "text",
                "placeholder": "Search providers...",
                "onInput": self._on_search,
            },
        )
        self.filter_buttons = [self._filter_button(cat) for cat in self.categories]
        self.sort = h(
            "select",
            {"class": "sort", "onChange": self._on_sort},
            [h("option", {"value": mode.value}, label) for mode, label in SORT_LABELS.items()],
        )
        self.sort.value = self.state.sort_mode.value
        self.grid = h("div", {"class": "providers-grid"})
        self.show_more_button = h(
            "button",
            {"class": "btn secondary", "type": "button", "onClick": self._on_show_more},
            "Show more",
        )
        self.footer = h("div", {"class": "providers-footer"}, self.show_more_button)

        controls = h(
            "div",
            {"class": "providers-controls"},
            [
                h(
                    "div",
                    {"class": "providers-left"},
                    [
                        h("div", {"class": "providers-search"}, self.search),
                        h("div", {"class": "providers-filters"}, self.filter_buttons),
                    ],
                ),
                h("div", {"class": "providers-right"}, self.sort),
            ],
        )
        self.root = h(
            "section",
            {"class": "section dark"},
            h(
                "div",
                {"class": "container"},
                [
                    h("h2", {}, text(data, "h2", "Providers")),
                    h("p", {"class": "subcenter"}, text(data, "subtitle")),
                    controls,
                    self.grid,
                    self.footer,
                ],
            ),
        )
        self.render_list()

    def _filter_button(self, category: str) -> Element:
        button = h(
            "button",
            {
                "class": "filter-btn active" if category == ALL_CATEGORY else "filter-btn",
                "type": "button",
                "data-category": category,
            },
            category,
        )
        button.add_event_listener(
            "click", lambda _event: self._on_filter(category, button)
        )
        return button

    # -- event handlers ---------------------------------------------------

    def _on_search(self, _event: Event) -> None:
        self.state = search_changed(
            self.state, self.search.value, initial_visible=self.initial_visible
        )
        self.render_list()

    def _on_filter(self, category: str, button: Element) -> None:
        self.state = category_selected(
            self.state, category, initial_visible=self.initial_visible
        )
        for other in self.filter_buttons:
            other.class_list.remove("active")
        button.class_list.add("active")
        self.render_list()

    def _on_sort(self, _event: Event) -> None:
        self.state = sort_changed(self.state, self.sort.value)
        self.render_list()

    def _on_show_more(self, _event: Event) -> None:
        self.state = show_more_clicked(self.state)
        self.render_list()

    # -- rendering --------------------------------------------------------

    def render_list(self) -> GridView:
        """Replace the tile list with the view of the current state."""
        self.view = compute_view(self.providers, self.state)
        self.grid.clear()
        if self.view.is_empty:
            self.grid.append_child(h("div", {"class": "providers-empty"}, NO_RESULTS_TEXT))
            self.footer.hidden = True
            return self.view
        for provider in self.view.visible:
            self.grid.append_child(render_tile(provider))
        self.footer.hidden = not self.view.show_more
        return self.view

    # -- programmatic interaction -----------------------------------------

    def type_query(self, value: str) -> GridView:
        """Set the search box text and fire its ``input`` event."""
        self.search.value = value
        self.search.dispatch_event(Event("input"))
        return self.view

    def select_category(self, category: str) -> GridView:
        """Click the filter button for ``category``."""
        for button in self.filter_buttons:
            if button.get_attribute("data-category") == category:
                button.click()
                break
        else:
            msg = f"Unknown category '{category}'. Known: {', '.join(self.categories)}"
            raise KeyError(msg)
        return self.view

    def choose_sort(self, mode: str) -> GridView:
        """Select a sort option and fire the ``change`` event."""
        self.sort.value = mode
        self.sort.dispatch_event(Event("change"))
        return self.view

    def click_show_more(self) -> GridView:
        self.show_more_button.click()
        return self.view


class ProvidersGridSection:
    """Registry adapter creating a fresh :class:`ProvidersGrid` per render."""

    kind = SectionKind.PROVIDERS_GRID

    def render(self, data: SectionData) -> Element:
        return ProvidersGrid(data).root


__all__ = [
    "ALL_CATEGORY",
    "NO_RESULTS_TEXT",
    "PAGE_SIZE",
    "GridState",
    "GridView",
    "Provider",
    "ProvidersGrid",
    "ProvidersGridSection",
    "SortMode",
    "category_selected",
    "compute_view",
    "initial_visible_count",
    "matches",
    "normalize_provider",
    "normalize_providers",
    "render_tile",
    "search_changed",
    "show_more_clicked",
    "sort_changed",
    "sort_providers",
]
